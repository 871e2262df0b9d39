"""Reply tracker service: tracker query + hydration + selection + resolution, per request."""

import asyncio
import enum
from typing import Optional

from inbox_assist.auth.session import AuthSession
from inbox_assist.config import HYDRATION_WAIT_SECONDS, TRACKER_PAGE_SIZE
from inbox_assist.db.models.thread_tracker import ThreadTrackerType
from inbox_assist.db.repositories.thread_tracker_repo import (
    get_needs_action_trackers,
    get_paginated_trackers,
)
from inbox_assist.mail_provider.factory import ClientFactory, get_client
from inbox_assist.reply_tracker.hydration import HydrationCache, get_threads_by_ids
from inbox_assist.reply_tracker.notifications import NotificationBuffer
from inbox_assist.reply_tracker.resolution import ResolutionAction, ResolutionOutcome
from inbox_assist.reply_tracker.selection import SelectionStore
from inbox_assist.reply_tracker.tracker_list import build_reply_tracker_view, thread_ids_for
from inbox_assist.reply_tracker.views import EmptyStateView, ReplyTrackerView, SelectedEmail
from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.reply_tracker.service")


class TrackerTab(str, enum.Enum):
    NEEDS_REPLY = "needs-reply"
    AWAITING = "awaiting"
    NEEDS_ACTION = "needs-action"
    RESOLVED = "resolved"


# tab -> (tracker type filter, resolved)
TAB_FILTERS: dict[TrackerTab, tuple[Optional[ThreadTrackerType], bool]] = {
    TrackerTab.NEEDS_REPLY: (ThreadTrackerType.NEEDS_REPLY, False),
    TrackerTab.AWAITING: (ThreadTrackerType.AWAITING, False),
    TrackerTab.NEEDS_ACTION: (ThreadTrackerType.NEEDS_ACTION, False),
    TrackerTab.RESOLVED: (None, True),
}


def parse_flag(value: str | None) -> bool:
    """Boolean query parameter: only the literal "true" enables it."""
    return (value or "").strip().lower() == "true"


class ReplyTrackerService:
    def __init__(
        self,
        client_factory: ClientFactory = get_client,
        cache: HydrationCache | None = None,
        selection: SelectionStore | None = None,
        resolution: ResolutionAction | None = None,
        page_size: int = TRACKER_PAGE_SIZE,
        hydration_wait_seconds: float | None = HYDRATION_WAIT_SECONDS,
    ):
        self.client_factory = client_factory
        self.cache = cache or HydrationCache()
        self.selection = selection or SelectionStore()
        self.resolution = resolution or ResolutionAction()
        self.page_size = page_size
        self.hydration_wait_seconds = hydration_wait_seconds

    async def list_view(
        self,
        session: AuthSession,
        tab: TrackerTab,
        page: int = 1,
        enabled: bool = False,
    ) -> ReplyTrackerView:
        user_id = session.user.id
        tracker_type, is_resolved = TAB_FILTERS[tab]
        tracker_page = await asyncio.to_thread(
            get_paginated_trackers, user_id, is_resolved, tracker_type, page, self.page_size
        )
        client = self.client_factory(session)

        async def fetch(thread_ids: list[str]):
            return await get_threads_by_ids(client, thread_ids)

        hydration = await self.cache.read(
            (user_id, tab.value),
            thread_ids_for(tracker_page.records),
            fetch,
            wait_seconds=self.hydration_wait_seconds,
        )
        view = build_reply_tracker_view(
            hydration,
            user_email=session.user.email,
            tracker_type=tracker_type,
            is_resolved=is_resolved,
            total_pages=tracker_page.total_pages,
            page=tracker_page.page,
            enabled=enabled,
            selected=self.selection.get(user_id),
            is_in_flight=lambda thread_id: self.resolution.is_in_flight(user_id, thread_id),
        )
        if isinstance(view, EmptyStateView):
            self.selection.clear(user_id, reason="empty_list")
        logger.debug(
            "reply_tracker.list_view",
            user_id=user_id,
            tab=tab.value,
            page=tracker_page.page,
            view=view.view,
            trackers=len(tracker_page.records),
        )
        return view

    async def resolve(
        self,
        session: AuthSession | None,
        thread_id: str,
        resolved: bool,
    ) -> tuple[ResolutionOutcome, NotificationBuffer]:
        notifier = NotificationBuffer()
        outcome = await self.resolution.run(session, thread_id, resolved, notifier)
        return outcome, notifier

    def select(self, session: AuthSession, thread_id: str, message_id: str) -> SelectedEmail:
        return self.selection.select(session.user.id, thread_id, message_id)

    def close_viewer(self, session: AuthSession) -> bool:
        return self.selection.clear(session.user.id, reason="closed")

    def refresh(self, session: AuthSession) -> int:
        """Full reload: drop the user's hydrated threads and the selection."""
        dropped = self.cache.invalidate(session.user.id)
        self.selection.clear(session.user.id, reason="refresh")
        logger.info("reply_tracker.refresh", user_id=session.user.id, dropped_entries=dropped)
        return dropped

    async def needs_action_count(self, session: AuthSession) -> int:
        trackers = await asyncio.to_thread(get_needs_action_trackers, session.user.id)
        return len(trackers)
