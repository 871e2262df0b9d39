"""JSON-backed mail provider: reads a mailbox export from inbox.json."""

import json
from pathlib import Path

from inbox_assist.exceptions import ThreadNotFoundError
from inbox_assist.mail_provider.models import Label, ParsedMessage, Thread, UNREAD_LABEL
from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.mail_provider")


class JsonMailboxProvider:
    """Mailbox read from a JSON file.

    The file is either a list of messages (one shared mailbox) or
    ``{"mailboxes": {"<address>": [messages...]}}`` keyed by owner address.
    """

    def __init__(self, inbox_path: Path, mailbox: str | None = None):
        self._inbox_path = Path(inbox_path)
        self._mailbox = (mailbox or "").lower() or None
        self._messages: list[ParsedMessage] = []
        logger.debug(
            "mail_provider.init",
            inbox_path=str(self._inbox_path),
            mailbox=self._mailbox,
        )
        self._load()

    def _load(self) -> None:
        if not self._inbox_path.exists():
            self._messages = []
            logger.warning("mail_provider.inbox_missing", inbox_path=str(self._inbox_path))
            return
        with self._inbox_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, list):
            items = data
        else:
            mailboxes = {k.lower(): v for k, v in (data.get("mailboxes") or {}).items()}
            items = mailboxes.get(self._mailbox or "", []) if mailboxes else data.get("messages", [])
        self._messages = []
        for item in items:
            try:
                self._messages.append(ParsedMessage.model_validate(item))
            except ValueError as e:
                logger.warning("mail_provider.message_invalid", error=str(e))
        logger.debug("mail_provider.inbox_loaded", message_count=len(self._messages))

    def get_label(self, label_id: str) -> Label:
        tagged = [m for m in self._messages if label_id in m.label_ids]
        unread = [m for m in tagged if UNREAD_LABEL in m.label_ids]
        return Label(id=label_id, messages_total=len(tagged), messages_unread=len(unread))

    def get_thread(self, thread_id: str) -> Thread:
        messages = [m for m in self._messages if m.thread_id == thread_id]
        if not messages:
            logger.debug("mail_provider.get_thread.miss", thread_id=thread_id)
            raise ThreadNotFoundError(thread_id)
        messages.sort(key=lambda m: int(m.internal_date or 0))
        logger.debug("mail_provider.get_thread.hit", thread_id=thread_id, count=len(messages))
        return Thread(id=thread_id, messages=messages, snippet=messages[-1].snippet)
