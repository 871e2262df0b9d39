"""ORM model for thread trackers: a thread awaiting a reply or needing action."""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Enum, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from inbox_assist.db.base import Base, TimestampMixin


class ThreadTrackerType(str, enum.Enum):
    AWAITING = "AWAITING"  # user replied, waiting on the other party
    NEEDS_REPLY = "NEEDS_REPLY"
    NEEDS_ACTION = "NEEDS_ACTION"


class ThreadTracker(Base, TimestampMixin):
    """One row per tracked message. Created by classification, only `resolved` changes here."""

    __tablename__ = "thread_trackers"
    __table_args__ = (
        UniqueConstraint("user_id", "thread_id", "message_id", name="uq_thread_tracker_message"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    thread_id: Mapped[str] = mapped_column(String(512), nullable=False, index=True)
    message_id: Mapped[str] = mapped_column(String(512), nullable=False)
    type: Mapped[ThreadTrackerType] = mapped_column(
        Enum(ThreadTrackerType, native_enum=False, length=32), nullable=False, index=True
    )
    resolved: Mapped[bool] = mapped_column(nullable=False, default=False, index=True)
    sent_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
