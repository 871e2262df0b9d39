"""Reply tracker API routes: list tabs, resolve, select, refresh."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, Field

from inbox_assist.auth.session import AuthSession, get_current_session
from inbox_assist.reply_tracker.service import ReplyTrackerService, TrackerTab, parse_flag

router = APIRouter(prefix="/reply-tracker", tags=["reply-tracker"])


class ResolveBody(BaseModel):
    thread_id: str = Field(..., alias="threadId")
    resolved: bool

    model_config = {"populate_by_name": True}


class SelectBody(BaseModel):
    thread_id: str = Field(..., alias="threadId")
    message_id: str = Field(..., alias="messageId")

    model_config = {"populate_by_name": True}


def _service(request: Request) -> ReplyTrackerService:
    return request.app.state.reply_tracker


def _require_session(session: AuthSession | None) -> AuthSession:
    if session is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return session


@router.get("/needs-action/summary")
async def needs_action_summary(
    request: Request,
    session: AuthSession | None = Depends(get_current_session),
) -> dict[str, Any]:
    """Return how many unresolved needs-action threads the user has."""
    session = _require_session(session)
    count = await _service(request).needs_action_count(session)
    return {"needs_action": count}


@router.get("/{tab}")
async def reply_tracker_tab(
    request: Request,
    tab: str,
    page: int = Query(1, ge=1),
    enabled: Optional[str] = Query(None, description="Show the analyzing state when the list is empty"),
    session: AuthSession | None = Depends(get_current_session),
) -> dict[str, Any]:
    """Render one tracker tab: loading, empty, list, or split view with the thread viewer."""
    session = _require_session(session)
    try:
        tracker_tab = TrackerTab(tab)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=f"Unknown tab: {tab!r}") from e
    view = await _service(request).list_view(session, tracker_tab, page=page, enabled=parse_flag(enabled))
    return view.model_dump(mode="json", by_alias=True)


@router.post("/resolve")
async def resolve_thread(
    request: Request,
    body: ResolveBody,
    session: AuthSession | None = Depends(get_current_session),
) -> dict[str, Any]:
    """Mark a thread done (resolved=true) or not done. Errors come back as an error notification."""
    outcome, notifier = await _service(request).resolve(session, body.thread_id, body.resolved)
    return {
        **outcome.model_dump(),
        "notifications": [n.model_dump() for n in notifier.items],
    }


@router.post("/select")
async def select_email(
    request: Request,
    body: SelectBody,
    session: AuthSession | None = Depends(get_current_session),
) -> dict[str, Any]:
    """Open the thread viewer for a message (nudge / reply)."""
    session = _require_session(session)
    selected = _service(request).select(session, body.thread_id, body.message_id)
    return {"selected": selected.model_dump()}


@router.delete("/select")
async def close_viewer(
    request: Request,
    session: AuthSession | None = Depends(get_current_session),
) -> dict[str, bool]:
    session = _require_session(session)
    return {"cleared": _service(request).close_viewer(session)}


@router.post("/refresh")
async def refresh(
    request: Request,
    session: AuthSession | None = Depends(get_current_session),
) -> dict[str, Any]:
    """Reload tracker data from the mailbox on the next list request."""
    session = _require_session(session)
    dropped = _service(request).refresh(session)
    return {"status": "refreshed", "dropped_entries": dropped}
