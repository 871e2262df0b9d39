"""Server-side tracker mutations returning success or an ActionError."""

import asyncio
from typing import Union

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from inbox_assist.auth.session import AuthSession
from inbox_assist.db.repositories.thread_tracker_repo import resolve_thread_tracker
from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.reply_tracker.actions")


class ActionSuccess(BaseModel):
    success: bool = True


class ActionError(BaseModel):
    error: str


ActionResult = Union[ActionSuccess, ActionError]


def is_action_error(result: object) -> bool:
    return isinstance(result, ActionError)


async def resolve_thread_tracker_action(
    session: AuthSession | None,
    thread_id: str,
    resolved: bool,
) -> ActionResult:
    """Set resolved on the session user's trackers for thread_id.

    Resolving an already-resolved thread is a success. A thread with no
    trackers is also a success (nothing to update).
    """
    if session is None:
        return ActionError(error="Not logged in")
    if not (thread_id or "").strip():
        return ActionError(error="Missing thread id")

    log = logger.bind(user_id=session.user.id, thread_id=thread_id, resolved=resolved)
    try:
        updated = await asyncio.to_thread(resolve_thread_tracker, session.user.id, thread_id, resolved)
    except SQLAlchemyError as e:
        log.exception("reply_tracker.resolve.db_error", error=str(e))
        return ActionError(error="Failed to update thread")
    log.info("reply_tracker.resolve.updated", updated=updated)
    return ActionSuccess()
