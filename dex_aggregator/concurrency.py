"""Fan-out-and-join helper."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, List


async def join_all(*awaitables: Awaitable[Any]) -> List[Any]:
    """Run awaitables concurrently and return their results in argument order.

    The first failure cancels every sibling still running and is re-raised
    as-is, so callers never receive a partial result. Cancelling the caller
    cancels all children.
    """
    if not awaitables:
        return []
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_as_coroutine(aw)) for aw in awaitables]
    except BaseExceptionGroup as group:
        raise _first_leaf(group) from None
    return [t.result() for t in tasks]


async def _as_coroutine(aw: Awaitable[Any]) -> Any:
    return await aw


def _first_leaf(group: BaseExceptionGroup) -> BaseException:
    exc: BaseException = group
    while isinstance(exc, BaseExceptionGroup):
        exc = exc.exceptions[0]
    return exc
