"""Thread hydration: thread ids -> full threads, behind a stale-while-revalidate cache.

Cache entries are keyed by (namespace, sorted unique thread ids). A read never
blanks out data it already has: stale entries are returned as-is while a single
background refetch per key replaces them, and a new id set borrows the
namespace's last loaded data until its own fetch lands.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Hashable, Iterable, Optional

from pydantic import BaseModel, Field

from inbox_assist.config import HYDRATION_TTL_SECONDS
from inbox_assist.exceptions import ThreadNotFoundError
from inbox_assist.mail_provider.models import Thread
from inbox_assist.mail_provider.protocol import MailProvider
from inbox_assist.utils.aio import maybe_await
from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.reply_tracker.hydration")


class ThreadsResponse(BaseModel):
    threads: list[Thread] = Field(default_factory=list)


Fetcher = Callable[[list[str]], Awaitable[ThreadsResponse]]
CacheKey = tuple[Hashable, tuple[str, ...]]


async def get_threads_by_ids(client: MailProvider, thread_ids: Iterable[str]) -> ThreadsResponse:
    """Fetch each thread from the provider. Threads missing from the mailbox are skipped."""
    threads: list[Thread] = []
    for thread_id in thread_ids:
        try:
            threads.append(await maybe_await(client.get_thread(thread_id)))
        except ThreadNotFoundError:
            logger.debug("hydration.thread_missing", thread_id=thread_id)
    return ThreadsResponse(threads=threads)


@dataclass
class CacheEntry:
    data: Optional[ThreadsResponse] = None
    fetched_at: Optional[float] = None
    task: Optional[asyncio.Task] = None
    error: Optional[str] = None

    @property
    def in_flight(self) -> bool:
        return self.task is not None and not self.task.done()


@dataclass
class CacheRead:
    """What a reader gets back: possibly-stale data plus the loading flag."""

    data: Optional[ThreadsResponse]
    is_loading: bool
    is_stale: bool = False


def _owned_by(namespace: Hashable, owner: Hashable) -> bool:
    return namespace == owner or (isinstance(namespace, tuple) and bool(namespace) and namespace[0] == owner)


class HydrationCache:
    """Stale-while-revalidate cache for hydrated thread sets.

    Each namespace keeps at most max_entries_per_namespace id sets, least
    recently read dropped first. The last successful fetch of a namespace is
    kept separately and stands in for a new id set until that set has loaded.
    """

    def __init__(
        self,
        ttl_seconds: float = HYDRATION_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        max_entries_per_namespace: int = 8,
    ):
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._max_entries = max(1, max_entries_per_namespace)
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._previous: dict[Hashable, ThreadsResponse] = {}

    @staticmethod
    def key_for(namespace: Hashable, thread_ids: Iterable[str]) -> CacheKey:
        return (namespace, tuple(sorted(set(thread_ids))))

    def peek(self, namespace: Hashable, thread_ids: Iterable[str]) -> CacheEntry | None:
        return self._entries.get(self.key_for(namespace, thread_ids))

    def __len__(self) -> int:
        return len(self._entries)

    def _touch(self, key: CacheKey) -> CacheEntry:
        # Re-inserting keeps dict order = least recently read first
        entry = self._entries.pop(key, None) or CacheEntry()
        self._entries[key] = entry
        self._prune(key[0])
        return entry

    def _prune(self, namespace: Hashable) -> None:
        keys = [k for k in self._entries if k[0] == namespace]
        for k in keys[: max(0, len(keys) - self._max_entries)]:
            del self._entries[k]
            logger.debug("hydration.evicted", namespace=str(namespace), thread_count=len(k[1]))

    def _start_fetch(self, key: CacheKey, entry: CacheEntry, fetcher: Fetcher) -> asyncio.Task:
        entry.task = asyncio.create_task(self._fetch(key, entry, fetcher))
        return entry.task

    async def _fetch(self, key: CacheKey, entry: CacheEntry, fetcher: Fetcher) -> None:
        log = logger.bind(namespace=str(key[0]), thread_count=len(key[1]))
        try:
            entry.data = await fetcher(list(key[1]))
            entry.fetched_at = self._clock()
            entry.error = None
            if self._entries.get(key) is entry:
                self._previous[key[0]] = entry.data
            log.debug("hydration.fetched", threads=len(entry.data.threads))
        except Exception as e:
            # Previous data (if any) stays in place
            entry.error = str(e)
            log.exception("hydration.fetch_error", error=str(e))
        finally:
            entry.task = None

    async def read(
        self,
        namespace: Hashable,
        thread_ids: Iterable[str],
        fetcher: Fetcher,
        wait_seconds: float | None = None,
    ) -> CacheRead:
        """Return cached data for the id set, fetching or revalidating as needed.

        With no cached data, a fetch is started and awaited for up to
        wait_seconds (None waits for completion, 0 does not wait). If it is
        still running the read reports is_loading, carrying the namespace's
        last loaded data when there is any.
        """
        key = self.key_for(namespace, thread_ids)
        if not key[1]:
            return CacheRead(data=ThreadsResponse(), is_loading=False)

        entry = self._touch(key)

        if entry.data is None:
            task = entry.task if entry.in_flight else self._start_fetch(key, entry, fetcher)
            if wait_seconds is None or wait_seconds > 0:
                try:
                    await asyncio.wait_for(asyncio.shield(task), wait_seconds)
                except asyncio.TimeoutError:
                    logger.debug("hydration.wait_timeout", wait_seconds=wait_seconds)
            if entry.data is None and entry.in_flight:
                previous = self._previous.get(namespace)
                return CacheRead(data=previous, is_loading=True, is_stale=previous is not None)
            return CacheRead(data=entry.data, is_loading=False)

        stale = self._clock() - (entry.fetched_at or 0.0) >= self._ttl_seconds
        if stale and not entry.in_flight:
            logger.debug("hydration.revalidate", namespace=str(namespace), thread_count=len(key[1]))
            self._start_fetch(key, entry, fetcher)
        return CacheRead(data=entry.data, is_loading=entry.in_flight, is_stale=stale)

    def invalidate(self, owner: Hashable | None = None) -> int:
        """Drop entries whose namespace is owner or starts with it (all entries when None).

        Returns how many id-set entries were dropped. In-flight fetches keep
        running but write into the detached entry.
        """
        keys = [k for k in self._entries if owner is None or _owned_by(k[0], owner)]
        for k in keys:
            del self._entries[k]
        for ns in [ns for ns in self._previous if owner is None or _owned_by(ns, owner)]:
            del self._previous[ns]
        return len(keys)
