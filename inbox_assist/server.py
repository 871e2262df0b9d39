"""FastAPI app for the clean wizard and reply tracker."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from inbox_assist import __version__
from inbox_assist.clean.routes import router as clean_router
from inbox_assist.db import init_db
from inbox_assist.mail_provider.factory import ClientFactory, get_client
from inbox_assist.reply_tracker.routes import router as reply_tracker_router
from inbox_assist.reply_tracker.service import ReplyTrackerService
from inbox_assist.utils.logger import bind_context, get_logger, unbind_context

logger = get_logger("inbox_assist.server")


@asynccontextmanager
async def _lifespan(app: FastAPI):
    init_db()
    logger.info("server.start", version=__version__)
    yield
    dropped = app.state.reply_tracker.cache.invalidate()
    logger.info("server.stop", dropped_cache_entries=dropped)


def create_app(
    client_factory: ClientFactory | None = None,
    reply_tracker: ReplyTrackerService | None = None,
) -> FastAPI:
    """Create the FastAPI app.

    client_factory maps a session to its mail provider (defaults to the JSON
    mailbox at INBOX_PATH). reply_tracker may be passed to share or stub state.
    """
    app = FastAPI(title="Inbox Assist", version=__version__, lifespan=_lifespan)
    app.state.client_factory = client_factory or get_client
    app.state.reply_tracker = reply_tracker or ReplyTrackerService(client_factory=app.state.client_factory)

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        bind_context(path=request.url.path, user_id=request.headers.get("x-user-id"))
        try:
            return await call_next(request)
        finally:
            unbind_context("path", "user_id")

    app.include_router(clean_router)
    app.include_router(reply_tracker_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
