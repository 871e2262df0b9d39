"""Utility modules."""

from inbox_assist.utils.aio import maybe_await
from inbox_assist.utils.logger import bind_context, get_logger, unbind_context

__all__ = [
    "maybe_await",
    "get_logger",
    "bind_context",
    "unbind_context",
]
