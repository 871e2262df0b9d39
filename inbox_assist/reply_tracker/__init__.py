"""Reply tracker: threads awaiting reply or action, resolve/unresolve, nudge/reply viewer."""

from inbox_assist.reply_tracker.hydration import CacheRead, HydrationCache, ThreadsResponse, get_threads_by_ids
from inbox_assist.reply_tracker.resolution import ResolutionAction, ResolutionOutcome
from inbox_assist.reply_tracker.selection import SelectionStore
from inbox_assist.reply_tracker.service import ReplyTrackerService, TrackerTab
from inbox_assist.reply_tracker.tracker_list import build_reply_tracker_view

__all__ = [
    "CacheRead",
    "HydrationCache",
    "ThreadsResponse",
    "get_threads_by_ids",
    "ResolutionAction",
    "ResolutionOutcome",
    "SelectionStore",
    "ReplyTrackerService",
    "TrackerTab",
    "build_reply_tracker_view",
]
