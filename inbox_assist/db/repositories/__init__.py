"""DB repositories: sync functions over the thread tracker table."""

from inbox_assist.db.repositories.thread_tracker_repo import (
    TrackerPage,
    get_needs_action_trackers,
    get_paginated_trackers,
    insert_tracker,
    resolve_thread_tracker,
)

__all__ = [
    "TrackerPage",
    "get_paginated_trackers",
    "get_needs_action_trackers",
    "resolve_thread_tracker",
    "insert_tracker",
]
