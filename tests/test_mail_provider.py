"""Tests for the JSON mailbox provider, counters and date conversion."""

import asyncio
import json
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from inbox_assist.exceptions import ThreadNotFoundError
from inbox_assist.mail_provider import (
    JsonMailboxProvider,
    get_inbox_count,
    get_unread_count,
    internal_date_to_datetime,
)

FIXTURE = Path(__file__).resolve().parent / "fixtures" / "inbox.json"


class TestJsonMailboxProvider(unittest.TestCase):
    def setUp(self):
        self.provider = JsonMailboxProvider(FIXTURE, mailbox="User@Example.com")

    def test_counters(self):
        self.assertEqual(asyncio.run(get_inbox_count(self.provider)), 3)
        self.assertEqual(asyncio.run(get_unread_count(self.provider)), 5)

    def test_thread_is_ordered_oldest_first(self):
        thread = self.provider.get_thread("t1")
        self.assertEqual([m.id for m in thread.messages], ["a1", "a2"])
        self.assertEqual(thread.last_message.id, "a2")
        self.assertEqual(thread.last_message.headers.from_, "user@example.com")

    def test_missing_thread_raises(self):
        with self.assertRaises(ThreadNotFoundError):
            self.provider.get_thread("tz")  # belongs to another mailbox

    def test_missing_file_is_empty_mailbox(self):
        provider = JsonMailboxProvider(Path("/nonexistent/inbox.json"), mailbox="user@example.com")
        self.assertEqual(provider.get_label("INBOX").messages_total, 0)

    def test_flat_list_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "inbox.json"
            path.write_text(
                json.dumps([
                    {"id": "x1", "threadId": "tx", "labelIds": ["INBOX"], "internalDate": "5"},
                    {"id": "broken"},
                ]),
                encoding="utf-8",
            )
            provider = JsonMailboxProvider(path)
            self.assertEqual(provider.get_label("INBOX").messages_total, 1)
            self.assertEqual(provider.get_thread("tx").messages[0].id, "x1")


class TestInternalDate(unittest.TestCase):
    def test_epoch_millis(self):
        self.assertEqual(
            internal_date_to_datetime("1700000000000"),
            datetime.fromtimestamp(1700000000, tz=timezone.utc),
        )

    def test_missing_or_malformed_is_epoch(self):
        epoch = datetime.fromtimestamp(0, tz=timezone.utc)
        for value in (None, "", "not-a-date"):
            with self.subTest(value=value):
                self.assertEqual(internal_date_to_datetime(value), epoch)


if __name__ == "__main__":
    unittest.main()
