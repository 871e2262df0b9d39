"""Inbox clean wizard."""

from inbox_assist.clean.steps import CleanAction, CleanStep, parse_step, step_after, unhandled_count
from inbox_assist.clean.wizard import CleanChoices, render_clean_page

__all__ = [
    "CleanAction",
    "CleanStep",
    "CleanChoices",
    "parse_step",
    "step_after",
    "unhandled_count",
    "render_clean_page",
]
