"""CLI commands: serve, trackers, seed."""

from typer import Typer

from inbox_assist.cli import seed as seed_module, serve as serve_module, trackers as trackers_module

app = Typer(help="Inbox clean wizard and reply tracker")


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command()(serve_module.serve)
    app.command()(trackers_module.trackers)
    app.command()(seed_module.seed)


register_commands()
