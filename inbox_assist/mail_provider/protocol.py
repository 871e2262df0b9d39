"""Mail provider protocol (Gmail-like interface)."""

from typing import Protocol

from inbox_assist.mail_provider.models import Label, Thread


class MailProvider(Protocol):
    """Abstract read interface over one mailbox."""

    def get_label(self, label_id: str) -> Label:
        """Return the label with message totals. Unknown labels report zero messages."""
        ...

    def get_thread(self, thread_id: str) -> Thread:
        """Return a thread with messages ordered oldest to newest. Raises ThreadNotFoundError."""
        ...
