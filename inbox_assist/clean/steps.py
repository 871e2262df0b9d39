"""Clean wizard steps and the step query-parameter parser."""

import enum


class CleanStep(enum.IntEnum):
    INTRO = 0
    ARCHIVE_OR_READ = 1
    TIME_RANGE = 2
    LABEL_OPTIONS = 3
    FINAL_CONFIRMATION = 4


class CleanAction(str, enum.Enum):
    ARCHIVE = "ARCHIVE"
    MARK_READ = "MARK_READ"


def parse_step(raw: str | int | None) -> CleanStep:
    """Parse the `step` query parameter. Missing, non-numeric or unknown values give INTRO."""
    if raw is None:
        return CleanStep.INTRO
    try:
        value = int(str(raw).strip())
    except ValueError:
        return CleanStep.INTRO
    try:
        return CleanStep(value)
    except ValueError:
        return CleanStep.INTRO


def step_after(step: CleanStep) -> CleanStep | None:
    """Step reached by the forward link, or None on the last step."""
    if step == CleanStep.FINAL_CONFIRMATION:
        return None
    return CleanStep(step + 1)


def unhandled_count(inbox_count: int, unread_count: int) -> int:
    """Approximate messages needing attention: unread messages still in the inbox."""
    return min(unread_count, inbox_count)
