"""Tests for the per-user selected email."""

import unittest

from inbox_assist.reply_tracker.selection import SelectionStore
from inbox_assist.reply_tracker.views import SelectedEmail


class TestSelectionStore(unittest.TestCase):
    def test_select_replaces_previous(self):
        store = SelectionStore()
        store.select("u1", "tA", "mA")
        store.select("u1", "tB", "mB")
        self.assertEqual(store.get("u1"), SelectedEmail(thread_id="tB", message_id="mB"))

    def test_users_are_independent(self):
        store = SelectionStore()
        store.select("u1", "tA", "mA")
        self.assertIsNone(store.get("u2"))

    def test_clear(self):
        store = SelectionStore()
        store.select("u1", "tA", "mA")
        self.assertTrue(store.clear("u1", reason="refresh"))
        self.assertIsNone(store.get("u1"))
        self.assertFalse(store.clear("u1"))


if __name__ == "__main__":
    unittest.main()
