"""Re-export all ORM models so Base.metadata has all tables."""

from inbox_assist.db.models.thread_tracker import ThreadTracker, ThreadTrackerType

__all__ = [
    "ThreadTracker",
    "ThreadTrackerType",
]
