"""Mail provider: Gmail-like interface, JSON mailbox implementation, counters."""

from inbox_assist.mail_provider.counters import get_inbox_count, get_unread_count
from inbox_assist.mail_provider.factory import ClientFactory, get_client
from inbox_assist.mail_provider.mock import JsonMailboxProvider
from inbox_assist.mail_provider.models import (
    Label,
    MessageHeaders,
    ParsedMessage,
    Thread,
    internal_date_to_datetime,
)
from inbox_assist.mail_provider.protocol import MailProvider

__all__ = [
    "Label",
    "MessageHeaders",
    "ParsedMessage",
    "Thread",
    "internal_date_to_datetime",
    "MailProvider",
    "JsonMailboxProvider",
    "ClientFactory",
    "get_client",
    "get_inbox_count",
    "get_unread_count",
]
