"""Pydantic models for the mailbox message shape (Gmail-style subset we need)."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

INBOX_LABEL = "INBOX"
UNREAD_LABEL = "UNREAD"


class MessageHeaders(BaseModel):
    """Parsed message headers."""

    from_: str = Field("", alias="from")
    to: str = ""
    subject: str = ""
    date: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "ignore"}


class ParsedMessage(BaseModel):
    """One message of a thread, with headers already parsed."""

    id: str
    thread_id: str = Field(..., alias="threadId")
    headers: MessageHeaders = MessageHeaders()
    snippet: str = ""
    internal_date: Optional[str] = Field(None, alias="internalDate")  # epoch milliseconds
    label_ids: list[str] = Field(default_factory=list, alias="labelIds")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @property
    def received_at(self) -> datetime:
        return internal_date_to_datetime(self.internal_date)


class Thread(BaseModel):
    """Thread of messages (oldest to newest)."""

    id: str
    messages: list[ParsedMessage] = Field(default_factory=list)
    snippet: str = ""

    @property
    def last_message(self) -> ParsedMessage | None:
        return self.messages[-1] if self.messages else None


class Label(BaseModel):
    """Mailbox label with its message totals."""

    id: str
    messages_total: int = 0
    messages_unread: int = 0


def internal_date_to_datetime(internal_date: str | int | None) -> datetime:
    """Convert an epoch-milliseconds internal date to an aware datetime.

    Missing or malformed values map to the epoch so they sort as the oldest.
    """
    if internal_date is None or internal_date == "":
        return datetime.fromtimestamp(0, tz=timezone.utc)
    try:
        return datetime.fromtimestamp(int(internal_date) / 1000, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return datetime.fromtimestamp(0, tz=timezone.utc)
