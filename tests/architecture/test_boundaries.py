from pytest_archon import archrule


def test_interceptor_core_independence() -> None:
    """
    The registry and pipelines must not depend on the bundled interceptors.
    Builtins are plain clients of the public interceptor API.
    """
    (
        archrule("interceptor_is_independent")
        .match("agent_interceptors.interceptor*")
        .should_not_import("agent_interceptors.builtin*")
        .should_not_import("agent_interceptors.scope*")
        .check("agent_interceptors")
    )


def test_pipelines_ignore_event_model() -> None:
    """
    Pipelines forward opaque payloads.
    They must not import the agent stream event model.
    """
    (
        archrule("pipelines_are_payload_agnostic")
        .match("agent_interceptors.interceptor*")
        .should_not_import("agent_interceptors.domain*")
        .check("agent_interceptors")
    )


def test_domain_isolation() -> None:
    """
    Domain layer should be self-contained.
    It must not import from interceptor, builtin, or scope.
    """
    (
        archrule("domain_isolation")
        .match("agent_interceptors.domain*")
        .should_not_import("agent_interceptors.interceptor*")
        .should_not_import("agent_interceptors.builtin*")
        .should_not_import("agent_interceptors.scope*")
        .check("agent_interceptors")
    )


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from any other layer of the package.
    """
    (
        archrule("primitives_isolation")
        .match("agent_interceptors.primitives*")
        .should_not_import("agent_interceptors.domain*")
        .should_not_import("agent_interceptors.interceptor*")
        .should_not_import("agent_interceptors.builtin*")
        .should_not_import("agent_interceptors.scope*")
        .check("agent_interceptors")
    )
