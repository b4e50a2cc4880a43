import asyncio

import pytest

from agent_interceptors import (
    InterceptorManager,
    InterceptorManagerNotConfiguredError,
    get_interceptor_manager,
    reset_interceptor_manager,
    set_interceptor_manager,
)


@pytest.fixture(autouse=True)
def _isolate_scope():
    reset_interceptor_manager()
    yield
    reset_interceptor_manager()


def test_get_without_manager_raises() -> None:
    with pytest.raises(InterceptorManagerNotConfiguredError):
        get_interceptor_manager()


def test_set_then_get() -> None:
    manager = InterceptorManager("session-1")

    set_interceptor_manager(manager)

    assert get_interceptor_manager() is manager


@pytest.mark.asyncio()
async def test_tasks_inherit_bound_manager() -> None:
    manager = InterceptorManager("session-2")
    set_interceptor_manager(manager)

    async def lookup() -> InterceptorManager:
        return get_interceptor_manager()

    assert await asyncio.create_task(lookup()) is manager
