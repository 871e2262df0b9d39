"""Clean wizard API route."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request

from inbox_assist.auth.session import AuthSession, get_current_session
from inbox_assist.clean.wizard import CleanChoices, render_clean_page

router = APIRouter(tags=["clean"])


@router.get("/clean")
async def clean_page(
    request: Request,
    step: Optional[str] = Query(None, description="Wizard step number"),
    action: Optional[str] = Query(None),
    time_range: Optional[str] = Query(None, alias="timeRange"),
    instructions: Optional[str] = Query(None),
    session: AuthSession | None = Depends(get_current_session),
) -> dict[str, Any]:
    """Render the clean wizard step selected by ?step=."""
    view = await render_clean_page(
        step,
        session,
        client_factory=request.app.state.client_factory,
        choices=CleanChoices(action=action, time_range=time_range, instructions=instructions),
    )
    return view.model_dump(mode="json")
