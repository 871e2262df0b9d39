"""Build the reply tracker view from a page of trackers and their hydrated threads."""

from typing import Callable, Iterable, Optional

from inbox_assist.db.models.thread_tracker import ThreadTracker, ThreadTrackerType
from inbox_assist.mail_provider.models import ParsedMessage, Thread
from inbox_assist.reply_tracker.hydration import CacheRead
from inbox_assist.reply_tracker.views import (
    EmptyStateView,
    ListView,
    LoadingView,
    PaginationView,
    RefreshControl,
    ReplyTrackerView,
    RowControl,
    SelectedEmail,
    SplitView,
    ThreadViewerPane,
    TrackerRow,
)

NO_EMAILS_MESSAGE = "No emails yet!"
ANALYZING_MESSAGE = "Analyzing your emails..."


def thread_ids_for(trackers: Iterable[ThreadTracker]) -> list[str]:
    """Thread ids of a tracker page, first occurrence order, no duplicates."""
    return list(dict.fromkeys(t.thread_id for t in trackers))


def sort_threads(threads: Iterable[Thread]) -> list[Thread]:
    """Most recent last message first. Threads without messages go last."""
    return sorted(
        threads,
        key=lambda t: t.last_message.received_at.timestamp() if t.last_message else float("-inf"),
        reverse=True,
    )


def empty_state(is_resolved: bool, enabled: bool) -> EmptyStateView:
    if enabled and not is_resolved:
        return EmptyStateView(message=ANALYZING_MESSAGE, analyzing=True, refresh=RefreshControl())
    return EmptyStateView(message=NO_EMAILS_MESSAGE)


def row_controls(
    message: ParsedMessage,
    is_resolved: bool,
    tracker_type: Optional[ThreadTrackerType],
    is_in_flight: Callable[[str], bool],
) -> list[RowControl]:
    loading = is_in_flight(message.thread_id)
    if is_resolved:
        return [
            RowControl(
                kind="unresolve",
                label="Mark as not done",
                thread_id=message.thread_id,
                resolved=False,
                loading=loading,
            )
        ]
    controls: list[RowControl] = []
    if tracker_type is not None:
        nudge = tracker_type == ThreadTrackerType.AWAITING
        controls.append(
            RowControl(
                kind="nudge" if nudge else "reply",
                label="Nudge" if nudge else "Reply",
                thread_id=message.thread_id,
                message_id=message.id,
            )
        )
    controls.append(
        RowControl(
            kind="resolve",
            label="Mark Done",
            thread_id=message.thread_id,
            resolved=True,
            loading=loading,
        )
    )
    return controls


def build_row(
    message: ParsedMessage,
    is_resolved: bool,
    tracker_type: Optional[ThreadTrackerType],
    is_in_flight: Callable[[str], bool],
) -> TrackerRow:
    return TrackerRow(
        thread_id=message.thread_id,
        message_id=message.id,
        from_=message.headers.from_,
        subject=message.headers.subject,
        snippet=message.snippet,
        received_at=message.received_at,
        controls=row_controls(message, is_resolved, tracker_type, is_in_flight),
    )


def build_reply_tracker_view(
    hydration: CacheRead,
    user_email: str,
    tracker_type: Optional[ThreadTrackerType] = None,
    is_resolved: bool = False,
    total_pages: int = 1,
    page: int = 1,
    enabled: bool = False,
    selected: Optional[SelectedEmail] = None,
    is_in_flight: Callable[[str], bool] = lambda thread_id: False,
) -> ReplyTrackerView:
    """Turn hydrated threads into the loading, empty, list or split view."""
    if hydration.is_loading and hydration.data is None:
        return LoadingView()

    threads = hydration.data.threads if hydration.data else []
    threads = [t for t in threads if t.last_message is not None]
    if not threads:
        return empty_state(is_resolved, enabled)

    rows = [
        build_row(t.last_message, is_resolved, tracker_type, is_in_flight)
        for t in sort_threads(threads)
    ]
    list_view = ListView(rows=rows, pagination=PaginationView(page=page, total_pages=total_pages))
    if selected is None:
        return list_view

    return SplitView(
        list_view=list_view,
        viewer=ThreadViewerPane(
            thread_id=selected.thread_id,
            auto_open_reply_for_message_id=selected.message_id,
            user_email=user_email,
        ),
    )
