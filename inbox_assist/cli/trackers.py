"""Trackers command: print a user's thread trackers as a table."""

from typing import Optional

import typer
from rich.table import Table

from inbox_assist.db.models.thread_tracker import ThreadTrackerType
from inbox_assist.db.repositories.thread_tracker_repo import get_paginated_trackers

from .shared import console, logger


def trackers(
    user_id: str = typer.Argument(..., help="Owner of the trackers"),
    tracker_type: Optional[ThreadTrackerType] = typer.Option(None, "--type", "-t", help="Filter by tracker type"),
    resolved: bool = typer.Option(False, "--resolved", help="Show resolved trackers instead of open ones"),
    page: int = typer.Option(1, "--page", min=1),
) -> None:
    """List trackers for a user, newest first."""
    log = logger.bind(command="trackers", user_id=user_id)
    result = get_paginated_trackers(user_id, resolved, tracker_type, page)
    log.info("trackers.listed", count=len(result.records), page=result.page, total_pages=result.total_pages)

    table = Table(title=f"Trackers for {user_id} (page {result.page}/{result.total_pages})")
    table.add_column("Thread", style="cyan")
    table.add_column("Message")
    table.add_column("Type", style="green")
    table.add_column("Resolved", justify="center")
    table.add_column("Created", style="dim")
    for row in result.records:
        table.add_row(
            row.thread_id,
            row.message_id,
            row.type.value,
            "yes" if row.resolved else "no",
            row.created_at.isoformat(timespec="seconds"),
        )
    console.print(table)
