"""Clean wizard page: the active step is a pure function of the URL and two mailbox counts."""

from typing import Optional

from pydantic import BaseModel

from inbox_assist.auth.session import AuthSession
from inbox_assist.clean.steps import CleanAction, CleanStep, parse_step, unhandled_count
from inbox_assist.clean.views import (
    ActionSelectionStepView,
    CleanInstructionsStepView,
    CleanPageView,
    ConfirmationStepView,
    IntroStepView,
    NotAuthenticatedView,
    TimeRangeStepView,
)
from inbox_assist.mail_provider.counters import get_inbox_count, get_unread_count
from inbox_assist.mail_provider.factory import ClientFactory, get_client
from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.clean.wizard")


class CleanChoices(BaseModel):
    """Choices made on earlier steps, carried forward in query parameters."""

    action: Optional[str] = None
    time_range: Optional[str] = None
    instructions: Optional[str] = None

    def clean_action(self) -> CleanAction:
        try:
            return CleanAction((self.action or "").upper())
        except ValueError:
            return CleanAction.ARCHIVE


async def render_clean_page(
    step_param: str | None,
    session: AuthSession | None,
    client_factory: ClientFactory = get_client,
    choices: CleanChoices | None = None,
) -> CleanPageView:
    """Return the view for the requested step.

    Both counters are fetched on every render, whichever step is shown.
    """
    if session is None or not session.user.email:
        logger.info("clean.not_authenticated")
        return NotAuthenticatedView()

    step = parse_step(step_param)
    client = client_factory(session)
    inbox_count = await get_inbox_count(client)
    unread_count = await get_unread_count(client)
    unhandled = unhandled_count(inbox_count, unread_count)
    logger.debug(
        "clean.render",
        step=step.name,
        inbox_count=inbox_count,
        unread_count=unread_count,
        unhandled_count=unhandled,
    )

    if step == CleanStep.ARCHIVE_OR_READ:
        return ActionSelectionStepView()
    if step == CleanStep.TIME_RANGE:
        return TimeRangeStepView()
    if step == CleanStep.LABEL_OPTIONS:
        return CleanInstructionsStepView()
    if step == CleanStep.FINAL_CONFIRMATION:
        choices = choices or CleanChoices()
        return ConfirmationStepView(
            unhandled_count=unhandled,
            action=choices.clean_action(),
            time_range=choices.time_range,
            instructions=choices.instructions,
        )
    # first / default step
    return IntroStepView(unhandled_count=unhandled, clean_action=CleanAction.ARCHIVE)
