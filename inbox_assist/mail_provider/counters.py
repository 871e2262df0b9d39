"""Mailbox counters used by the clean wizard."""

from inbox_assist.mail_provider.models import INBOX_LABEL, UNREAD_LABEL
from inbox_assist.mail_provider.protocol import MailProvider
from inbox_assist.utils.aio import maybe_await


async def get_inbox_count(client: MailProvider) -> int:
    label = await maybe_await(client.get_label(INBOX_LABEL))
    return label.messages_total or 0


async def get_unread_count(client: MailProvider) -> int:
    label = await maybe_await(client.get_label(UNREAD_LABEL))
    return label.messages_total or 0
