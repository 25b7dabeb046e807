"""Async helpers for running blocking engine calls off the event loop."""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


async def maybe_to_thread(offload: bool, func: Callable[..., T], *args: Any) -> T:
    """Run ``func`` in a worker thread when ``offload`` is True."""
    if offload:
        return await asyncio.to_thread(func, *args)
    return func(*args)
