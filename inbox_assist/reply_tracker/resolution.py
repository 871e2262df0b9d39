"""Resolve/unresolve action with a per-row in-flight guard."""

from typing import Awaitable, Callable, Optional

from pydantic import BaseModel

from inbox_assist.auth.session import AuthSession
from inbox_assist.reply_tracker.actions import ActionResult, is_action_error, resolve_thread_tracker_action
from inbox_assist.reply_tracker.notifications import Notifier
from inbox_assist.utils.aio import maybe_await
from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.reply_tracker.resolution")

ResolveFn = Callable[[Optional[AuthSession], str, bool], Awaitable[ActionResult] | ActionResult]

MARKED_DONE = "Marked as done!"
MARKED_NOT_DONE = "Marked as not done!"


class ResolutionOutcome(BaseModel):
    dispatched: bool
    ok: bool = False
    error: Optional[str] = None


class ResolutionAction:
    """Runs the resolve mutation for one row at a time.

    Each (user, thread) has its own idle/in-flight state, so rows do not block
    each other. A call for a row that is already in flight returns without
    dispatching. Displayed state is not flipped here; it follows the next query.
    """

    def __init__(self, resolve: ResolveFn = resolve_thread_tracker_action):
        self._resolve = resolve
        self._in_flight: set[tuple[str, str]] = set()

    @staticmethod
    def _key(session: AuthSession | None, thread_id: str) -> tuple[str, str]:
        return (session.user.id if session else "", thread_id)

    def is_in_flight(self, user_id: str, thread_id: str) -> bool:
        return (user_id, thread_id) in self._in_flight

    async def run(
        self,
        session: AuthSession | None,
        thread_id: str,
        resolved: bool,
        notifier: Notifier,
    ) -> ResolutionOutcome:
        key = self._key(session, thread_id)
        log = logger.bind(user_id=key[0], thread_id=thread_id, resolved=resolved)
        if key in self._in_flight:
            log.debug("reply_tracker.resolve.skip_in_flight")
            return ResolutionOutcome(dispatched=False)

        self._in_flight.add(key)
        try:
            result = await maybe_await(self._resolve(session, thread_id, resolved))
            if is_action_error(result):
                notifier.toast_error("Error", result.error)
                log.warning("reply_tracker.resolve.error", error=result.error)
                return ResolutionOutcome(dispatched=True, ok=False, error=result.error)
            notifier.toast_success("Success", MARKED_DONE if resolved else MARKED_NOT_DONE)
            log.info("reply_tracker.resolve.success")
            return ResolutionOutcome(dispatched=True, ok=True)
        except Exception as e:
            error = str(e) or "Failed to update thread"
            log.exception("reply_tracker.resolve.failed", error=error)
            notifier.toast_error("Error", error)
            return ResolutionOutcome(dispatched=True, ok=False, error=error)
        finally:
            self._in_flight.discard(key)
