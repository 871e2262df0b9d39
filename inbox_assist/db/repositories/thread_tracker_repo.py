"""Thread tracker repository: paginated queries, resolve toggle, insert."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update

from inbox_assist.config import TRACKER_PAGE_SIZE
from inbox_assist.db import get_session
from inbox_assist.db.models.thread_tracker import ThreadTracker, ThreadTrackerType
from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.db.thread_tracker_repo")


@dataclass
class TrackerPage:
    """One page of trackers plus the page count for the same filter."""

    records: list[ThreadTracker] = field(default_factory=list)
    total_pages: int = 1
    page: int = 1


def _filtered(query, user_id: str, resolved: bool, tracker_type: Optional[ThreadTrackerType]):
    query = query.where(ThreadTracker.user_id == user_id).where(ThreadTracker.resolved == resolved)
    if tracker_type is not None:
        query = query.where(ThreadTracker.type == tracker_type)
    return query


def get_paginated_trackers(
    user_id: str,
    resolved: bool,
    tracker_type: Optional[ThreadTrackerType] = None,
    page: int = 1,
    page_size: int = TRACKER_PAGE_SIZE,
) -> TrackerPage:
    """Return a page of trackers for user_id, newest first.

    Pages are 1-based; page < 1 reads page 1 and page_size < 1 is treated as 1.
    """
    page = max(page, 1)
    page_size = max(page_size, 1)
    with get_session() as session:
        count_q = _filtered(select(func.count(ThreadTracker.id)), user_id, resolved, tracker_type)
        total = session.scalar(count_q) or 0
        q = (
            _filtered(select(ThreadTracker), user_id, resolved, tracker_type)
            .order_by(ThreadTracker.created_at.desc(), ThreadTracker.id.desc())
            .limit(page_size)
            .offset((page - 1) * page_size)
        )
        rows = list(session.scalars(q).all())
        session.expunge_all()
    total_pages = max(1, math.ceil(total / page_size))
    logger.debug(
        "thread_tracker_repo.page",
        user_id=user_id,
        resolved=resolved,
        type=tracker_type.value if tracker_type else None,
        page=page,
        total=total,
    )
    return TrackerPage(records=rows, total_pages=total_pages, page=page)


def get_needs_action_trackers(user_id: str) -> list[ThreadTracker]:
    """Return all unresolved NEEDS_ACTION trackers for user_id, newest first."""
    with get_session() as session:
        q = (
            _filtered(select(ThreadTracker), user_id, False, ThreadTrackerType.NEEDS_ACTION)
            .order_by(ThreadTracker.created_at.desc())
        )
        rows = list(session.scalars(q).all())
        session.expunge_all()
        return rows


def resolve_thread_tracker(user_id: str, thread_id: str, resolved: bool) -> int:
    """Set resolved on every tracker of thread_id owned by user_id. Returns the number of rows matched."""
    with get_session() as session:
        result = session.execute(
            update(ThreadTracker)
            .where(ThreadTracker.user_id == user_id)
            .where(ThreadTracker.thread_id == thread_id)
            .values(resolved=resolved)
        )
        return result.rowcount or 0


def insert_tracker(
    user_id: str,
    thread_id: str,
    message_id: str,
    tracker_type: ThreadTrackerType,
    resolved: bool = False,
    sent_at: Optional[datetime] = None,
    created_at: Optional[datetime] = None,
) -> ThreadTracker:
    """Insert a tracker row. created_at defaults to now."""
    with get_session() as session:
        row = ThreadTracker(
            user_id=user_id,
            thread_id=thread_id,
            message_id=message_id,
            type=tracker_type,
            resolved=resolved,
            sent_at=sent_at,
        )
        if created_at is not None:
            row.created_at = created_at
        session.add(row)
        session.flush()
        session.refresh(row)
        session.expunge(row)
        return row
