"""Tests for render_clean_page: auth short-circuit, counters, step -> view mapping."""

import asyncio
import unittest

from inbox_assist.auth.session import build_session
from inbox_assist.clean.steps import CleanAction
from inbox_assist.clean.views import (
    ActionSelectionStepView,
    CleanInstructionsStepView,
    ConfirmationStepView,
    IntroStepView,
    NotAuthenticatedView,
    TimeRangeStepView,
)
from inbox_assist.clean.wizard import CleanChoices, render_clean_page
from inbox_assist.mail_provider.models import Label


class CountingClient:
    """Mail client stub that records label lookups."""

    def __init__(self, inbox: int, unread: int):
        self.totals = {"INBOX": inbox, "UNREAD": unread}
        self.calls: list[str] = []

    def get_label(self, label_id: str) -> Label:
        self.calls.append(label_id)
        return Label(id=label_id, messages_total=self.totals.get(label_id, 0))

    def get_thread(self, thread_id: str):
        raise AssertionError("wizard must not hydrate threads")


class TestRenderCleanPage(unittest.TestCase):
    def setUp(self):
        self.session = build_session("u1", "user@example.com")
        self.client = CountingClient(inbox=3, unread=5)
        self.factory_calls = 0

    def _factory(self, session):
        self.factory_calls += 1
        return self.client

    def render(self, step, session="default", choices=None):
        session = self.session if session == "default" else session
        return asyncio.run(render_clean_page(step, session, client_factory=self._factory, choices=choices))

    def test_not_authenticated_does_no_work(self):
        view = self.render("2", session=None)
        self.assertIsInstance(view, NotAuthenticatedView)
        self.assertEqual(view.message, "Not authenticated")
        self.assertEqual(self.factory_calls, 0)
        self.assertEqual(self.client.calls, [])

    def test_intro_is_default(self):
        for step in (None, "", "abc", "9", "-3"):
            with self.subTest(step=step):
                view = self.render(step)
                self.assertIsInstance(view, IntroStepView)
                self.assertEqual(view.unhandled_count, 3)
                self.assertEqual(view.clean_action, CleanAction.ARCHIVE)

    def test_step_mapping(self):
        self.assertIsInstance(self.render("1"), ActionSelectionStepView)
        self.assertIsInstance(self.render("2"), TimeRangeStepView)
        self.assertIsInstance(self.render("3"), CleanInstructionsStepView)
        confirmation = self.render("4")
        self.assertIsInstance(confirmation, ConfirmationStepView)
        self.assertEqual(confirmation.unhandled_count, 3)

    def test_counters_fetched_on_every_step(self):
        for step in ("0", "1", "2", "3", "4"):
            self.client.calls.clear()
            self.render(step)
            self.assertEqual(sorted(self.client.calls), ["INBOX", "UNREAD"], step)

    def test_unhandled_uses_unread_when_smaller(self):
        self.client = CountingClient(inbox=10, unread=1)
        self.assertEqual(self.render("0").unhandled_count, 1)

    def test_confirmation_echoes_choices(self):
        view = self.render(
            "4",
            choices=CleanChoices(action="mark_read", time_range="7", instructions="keep invoices"),
        )
        self.assertEqual(view.action, CleanAction.MARK_READ)
        self.assertEqual(view.time_range, "7")
        self.assertEqual(view.instructions, "keep invoices")

    def test_confirmation_unknown_action_defaults_to_archive(self):
        view = self.render("4", choices=CleanChoices(action="delete"))
        self.assertEqual(view.action, CleanAction.ARCHIVE)


if __name__ == "__main__":
    unittest.main()
