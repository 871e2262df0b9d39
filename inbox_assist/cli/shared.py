"""Shared CLI helpers: console and logger."""

from rich.console import Console

from inbox_assist.utils.logger import get_logger

console = Console()
logger = get_logger("inbox_assist.cli")
