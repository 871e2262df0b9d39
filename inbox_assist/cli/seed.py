"""Seed command: load thread trackers from a JSON file."""

import json
from datetime import datetime
from pathlib import Path

import typer
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError

from inbox_assist.db.models.thread_tracker import ThreadTrackerType
from inbox_assist.db.repositories.thread_tracker_repo import insert_tracker

from .shared import console, logger


class TrackerSeed(BaseModel):
    user_id: str = Field(..., alias="userId")
    thread_id: str = Field(..., alias="threadId")
    message_id: str = Field(..., alias="messageId")
    type: ThreadTrackerType
    resolved: bool = False
    sent_at: datetime | None = Field(None, alias="sentAt")
    created_at: datetime | None = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True}


def seed(path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON list of trackers")) -> None:
    """Insert trackers from a JSON file. Duplicates are skipped."""
    log = logger.bind(command="seed", path=str(path))
    try:
        items = [TrackerSeed.model_validate(x) for x in json.loads(path.read_text(encoding="utf-8"))]
    except ValueError as e:
        console.print(f"[red]Invalid seed file: {e}[/red]")
        log.error("seed.invalid_file", error=str(e))
        raise typer.Exit(1) from e

    inserted = skipped = 0
    for item in items:
        try:
            insert_tracker(
                user_id=item.user_id,
                thread_id=item.thread_id,
                message_id=item.message_id,
                tracker_type=item.type,
                resolved=item.resolved,
                sent_at=item.sent_at,
                created_at=item.created_at,
            )
            inserted += 1
        except IntegrityError:
            skipped += 1
    log.info("seed.done", inserted=inserted, skipped=skipped)
    console.print(f"[green]Inserted {inserted} trackers[/green] ([dim]{skipped} duplicates skipped[/dim])")
