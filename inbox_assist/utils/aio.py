"""Small asyncio helpers shared by the tracker and wizard."""

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


async def maybe_await(value: T | Awaitable[T]) -> T:
    """Await if value is awaitable; otherwise return as-is (sync provider or store)."""
    if asyncio.iscoroutine(value) or isinstance(value, asyncio.Future):
        return await value
    return value
