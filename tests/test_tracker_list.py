"""Tests for build_reply_tracker_view: loading, empty states, sorting, row controls, split view."""

import unittest

from inbox_assist.db.models import ThreadTracker, ThreadTrackerType
from inbox_assist.mail_provider.models import MessageHeaders, ParsedMessage, Thread
from inbox_assist.reply_tracker.hydration import CacheRead, ThreadsResponse
from inbox_assist.reply_tracker.tracker_list import (
    ANALYZING_MESSAGE,
    NO_EMAILS_MESSAGE,
    build_reply_tracker_view,
    thread_ids_for,
)
from inbox_assist.reply_tracker.views import EmptyStateView, ListView, LoadingView, SelectedEmail, SplitView


def _thread(thread_id: str, *dates: int) -> Thread:
    messages = [
        ParsedMessage(
            id=f"{thread_id}-m{i}",
            thread_id=thread_id,
            headers=MessageHeaders(from_=f"sender{i}@example.org", subject=f"Subject {thread_id}"),
            snippet=f"snippet {thread_id} {i}",
            internal_date=str(date),
        )
        for i, date in enumerate(dates)
    ]
    return Thread(id=thread_id, messages=messages)


def _loaded(*threads: Thread) -> CacheRead:
    return CacheRead(data=ThreadsResponse(threads=list(threads)), is_loading=False)


class TestEmptyAndLoading(unittest.TestCase):
    def test_loading_without_data(self):
        view = build_reply_tracker_view(CacheRead(data=None, is_loading=True), "user@example.com")
        self.assertIsInstance(view, LoadingView)

    def test_loading_with_previous_data_shows_list(self):
        read = CacheRead(data=ThreadsResponse(threads=[_thread("t1", 1)]), is_loading=True, is_stale=True)
        self.assertIsInstance(build_reply_tracker_view(read, "user@example.com"), ListView)

    def test_plain_empty_message_when_flag_off(self):
        view = build_reply_tracker_view(_loaded(), "user@example.com", is_resolved=False, enabled=False)
        self.assertIsInstance(view, EmptyStateView)
        self.assertEqual(view.message, NO_EMAILS_MESSAGE)
        self.assertFalse(view.analyzing)
        self.assertIsNone(view.refresh)

    def test_analyzing_state_when_flag_on_for_unresolved(self):
        view = build_reply_tracker_view(_loaded(), "user@example.com", is_resolved=False, enabled=True)
        self.assertEqual(view.message, ANALYZING_MESSAGE)
        self.assertTrue(view.analyzing)
        self.assertEqual(view.refresh.label, "Refresh")
        self.assertEqual(view.refresh.reset_after_ms, 1000)

    def test_resolved_list_never_shows_analyzing(self):
        view = build_reply_tracker_view(_loaded(), "user@example.com", is_resolved=True, enabled=True)
        self.assertEqual(view.message, NO_EMAILS_MESSAGE)
        self.assertFalse(view.analyzing)

    def test_failed_hydration_falls_through_to_empty(self):
        view = build_reply_tracker_view(CacheRead(data=None, is_loading=False), "user@example.com")
        self.assertIsInstance(view, EmptyStateView)

    def test_threads_without_messages_are_dropped(self):
        view = build_reply_tracker_view(_loaded(Thread(id="t-empty")), "user@example.com")
        self.assertIsInstance(view, EmptyStateView)


class TestListView(unittest.TestCase):
    def test_sorted_by_last_message_desc(self):
        # last-message timestamps: t_a=30, t_b=10, t_c=20 (t_b has an old-but-late first message)
        view = build_reply_tracker_view(
            _loaded(_thread("t_b", 5, 10), _thread("t_a", 1, 30), _thread("t_c", 20)),
            "user@example.com",
        )
        self.assertEqual([r.thread_id for r in view.rows], ["t_a", "t_c", "t_b"])

    def test_row_uses_last_message(self):
        view = build_reply_tracker_view(_loaded(_thread("t1", 1, 2)), "user@example.com")
        row = view.rows[0]
        self.assertEqual(row.message_id, "t1-m1")
        self.assertEqual(row.from_, "sender1@example.org")
        self.assertEqual(row.snippet, "snippet t1 1")
        self.assertEqual(row.model_dump(by_alias=True)["from"], "sender1@example.org")

    def test_resolved_rows_only_unresolve(self):
        view = build_reply_tracker_view(
            _loaded(_thread("t1", 1)), "user@example.com",
            tracker_type=ThreadTrackerType.AWAITING, is_resolved=True,
        )
        controls = view.rows[0].controls
        self.assertEqual([c.kind for c in controls], ["unresolve"])
        self.assertIs(controls[0].resolved, False)
        self.assertEqual(controls[0].label, "Mark as not done")

    def test_awaiting_rows_nudge_and_resolve(self):
        view = build_reply_tracker_view(
            _loaded(_thread("t1", 1, 2)), "user@example.com", tracker_type=ThreadTrackerType.AWAITING,
        )
        nudge, resolve = view.rows[0].controls
        self.assertEqual((nudge.kind, nudge.label), ("nudge", "Nudge"))
        self.assertEqual((nudge.thread_id, nudge.message_id), ("t1", "t1-m1"))
        self.assertEqual((resolve.kind, resolve.label, resolve.resolved), ("resolve", "Mark Done", True))

    def test_other_types_get_reply(self):
        for tracker_type in (ThreadTrackerType.NEEDS_REPLY, ThreadTrackerType.NEEDS_ACTION):
            view = build_reply_tracker_view(_loaded(_thread("t1", 1)), "u@example.com", tracker_type=tracker_type)
            self.assertEqual(view.rows[0].controls[0].label, "Reply")

    def test_no_type_means_no_nudge_control(self):
        view = build_reply_tracker_view(_loaded(_thread("t1", 1)), "user@example.com")
        self.assertEqual([c.kind for c in view.rows[0].controls], ["resolve"])

    def test_loading_flag_is_per_row(self):
        view = build_reply_tracker_view(
            _loaded(_thread("t1", 2), _thread("t2", 1)),
            "user@example.com",
            is_in_flight=lambda thread_id: thread_id == "t2",
        )
        loading = {r.thread_id: r.controls[-1].loading for r in view.rows}
        self.assertEqual(loading, {"t1": False, "t2": True})

    def test_pagination(self):
        view = build_reply_tracker_view(_loaded(_thread("t1", 1)), "user@example.com", total_pages=3, page=2)
        dumped = view.pagination.model_dump()
        self.assertEqual(dumped, {"page": 2, "total_pages": 3, "has_previous": True, "has_next": True})


class TestSplitView(unittest.TestCase):
    def test_selected_email_opens_viewer(self):
        view = build_reply_tracker_view(
            _loaded(_thread("t1", 1), _thread("t2", 2)),
            "user@example.com",
            selected=SelectedEmail(thread_id="t1", message_id="t1-m0"),
        )
        self.assertIsInstance(view, SplitView)
        self.assertEqual(view.list_size.default_size, 40)
        self.assertEqual(view.list_size.min_size, 35)
        self.assertEqual(view.viewer.thread_id, "t1")
        self.assertEqual(view.viewer.auto_open_reply_for_message_id, "t1-m0")
        self.assertTrue(view.viewer.show_reply_button)
        self.assertEqual(view.viewer.user_email, "user@example.com")
        self.assertEqual(len(view.list_view.rows), 2)


class TestThreadIdsFor(unittest.TestCase):
    def test_dedupes_in_order(self):
        trackers = [
            ThreadTracker(thread_id="t2", message_id="a", user_id="u", type=ThreadTrackerType.AWAITING),
            ThreadTracker(thread_id="t1", message_id="b", user_id="u", type=ThreadTrackerType.AWAITING),
            ThreadTracker(thread_id="t2", message_id="c", user_id="u", type=ThreadTrackerType.AWAITING),
        ]
        self.assertEqual(thread_ids_for(trackers), ["t2", "t1"])


if __name__ == "__main__":
    unittest.main()
