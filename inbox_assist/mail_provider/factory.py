"""Mail client factory: one provider handle per authenticated session."""

from pathlib import Path
from typing import Callable

from inbox_assist.auth.session import AuthSession
from inbox_assist.config import INBOX_PATH
from inbox_assist.mail_provider.mock import JsonMailboxProvider
from inbox_assist.mail_provider.protocol import MailProvider

ClientFactory = Callable[[AuthSession], MailProvider]


def get_client(session: AuthSession, inbox_path: Path | None = None) -> MailProvider:
    """Return a mail provider scoped to the session user's mailbox."""
    return JsonMailboxProvider(inbox_path=inbox_path or INBOX_PATH, mailbox=session.user.email)
