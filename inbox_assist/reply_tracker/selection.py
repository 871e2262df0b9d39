"""Per-user selected email for the split-pane viewer."""

from inbox_assist.reply_tracker.views import SelectedEmail
from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.reply_tracker.selection")


class SelectionStore:
    """In-memory selection keyed by user id. At most one selected email per user.

    Transitions: select (set or replace), clear (refresh, empty list, explicit close).
    """

    def __init__(self) -> None:
        self._selected: dict[str, SelectedEmail] = {}

    def get(self, user_id: str) -> SelectedEmail | None:
        return self._selected.get(user_id)

    def select(self, user_id: str, thread_id: str, message_id: str) -> SelectedEmail:
        selected = SelectedEmail(thread_id=thread_id, message_id=message_id)
        self._selected[user_id] = selected
        logger.debug("selection.set", user_id=user_id, thread_id=thread_id, message_id=message_id)
        return selected

    def clear(self, user_id: str, reason: str = "explicit") -> bool:
        """Remove the selection. Returns True if one was set."""
        removed = self._selected.pop(user_id, None) is not None
        if removed:
            logger.debug("selection.cleared", user_id=user_id, reason=reason)
        return removed
