"""Entry point: delegates to the CLI app (serve, trackers, seed)."""

from rich.traceback import install

from inbox_assist.cli import app

if __name__ == "__main__":
    install(show_locals=False, max_frames=5, word_wrap=True)
    app()
