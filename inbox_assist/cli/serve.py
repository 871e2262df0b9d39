"""Serve mode: run the FastAPI app under uvicorn."""

import sys

import typer
import uvicorn

from inbox_assist.config import INBOX_PATH, SERVER_PORT
from inbox_assist.db import init_db
from inbox_assist.server import create_app

from .shared import console, logger


def serve(
    port: int = typer.Option(SERVER_PORT, "--port", "-p", help="Port for the HTTP server"),
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Bind host"),
) -> None:
    """Start the clean wizard / reply tracker API."""
    init_db()
    log = logger.bind(command="serve", port=port)
    log.info("serve.start")
    if not INBOX_PATH.exists():
        console.print(f"[yellow]Mailbox file not found at {INBOX_PATH}; threads will not hydrate.[/yellow]")
        log.warning("serve.inbox_missing", inbox_path=str(INBOX_PATH))

    app = create_app()
    console.print(f"[green]Starting server on http://{host}:{port}[/green]")
    console.print("[dim]Endpoints: GET /clean, GET /reply-tracker/{tab}, POST /reply-tracker/resolve, GET /health[/dim]")
    try:
        uvicorn.run(app, host=host, port=port, log_level="info", timeout_graceful_shutdown=15)
    except KeyboardInterrupt:
        console.print("\n[dim]Shutting down...[/dim]")
        sys.exit(0)
