"""View models for each clean wizard step."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, computed_field

from inbox_assist.clean.steps import CleanAction, CleanStep, step_after


class Option(BaseModel):
    value: str
    label: str
    description: str = ""
    recommended: bool = False


class InstructionToggle(BaseModel):
    name: str
    label: str
    default: bool = True


class NotAuthenticatedView(BaseModel):
    view: Literal["not_authenticated"] = "not_authenticated"
    message: str = "Not authenticated"


class IntroStepView(BaseModel):
    view: Literal["intro"] = "intro"
    step: CleanStep = CleanStep.INTRO
    unhandled_count: int
    clean_action: CleanAction = CleanAction.ARCHIVE
    title: str = "Clean up your inbox"
    next_step: Optional[CleanStep] = step_after(CleanStep.INTRO)

    @computed_field
    @property
    def summary(self) -> str:
        return f"You have {self.unhandled_count:,} unhandled emails in your inbox."


class ActionSelectionStepView(BaseModel):
    view: Literal["action_selection"] = "action_selection"
    step: CleanStep = CleanStep.ARCHIVE_OR_READ
    prompt: str = "Would you like cleaned emails to be archived or marked as read?"
    options: list[Option] = Field(
        default_factory=lambda: [
            Option(value=CleanAction.ARCHIVE.value, label="Archive", recommended=True),
            Option(value=CleanAction.MARK_READ.value, label="Mark as read"),
        ]
    )
    next_step: Optional[CleanStep] = step_after(CleanStep.ARCHIVE_OR_READ)


class TimeRangeStepView(BaseModel):
    view: Literal["time_range"] = "time_range"
    step: CleanStep = CleanStep.TIME_RANGE
    prompt: str = "Which emails would you like to process?"
    options: list[Option] = Field(
        default_factory=lambda: [
            Option(value="0", label="All emails"),
            Option(value="1", label="Older than 1 day"),
            Option(value="3", label="Older than 3 days"),
            Option(value="7", label="Older than 1 week", recommended=True),
            Option(value="14", label="Older than 2 weeks"),
            Option(value="30", label="Older than 1 month"),
        ]
    )
    next_step: Optional[CleanStep] = step_after(CleanStep.TIME_RANGE)


class CleanInstructionsStepView(BaseModel):
    view: Literal["clean_instructions"] = "clean_instructions"
    step: CleanStep = CleanStep.LABEL_OPTIONS
    prompt: str = "Any emails you want to keep in your inbox?"
    toggles: list[InstructionToggle] = Field(
        default_factory=lambda: [
            InstructionToggle(name="skipReply", label="Don't archive emails needing a reply"),
            InstructionToggle(name="skipStarred", label="Don't archive starred emails"),
            InstructionToggle(name="skipCalendar", label="Don't archive calendar invites"),
            InstructionToggle(name="skipReceipt", label="Don't archive receipts", default=False),
            InstructionToggle(name="skipAttachment", label="Don't archive emails with attachments", default=False),
        ]
    )
    instructions_placeholder: str = "e.g. Keep anything from my manager"
    next_step: Optional[CleanStep] = step_after(CleanStep.LABEL_OPTIONS)


class ConfirmationStepView(BaseModel):
    view: Literal["confirmation"] = "confirmation"
    step: CleanStep = CleanStep.FINAL_CONFIRMATION
    unhandled_count: int
    action: CleanAction = CleanAction.ARCHIVE
    time_range: Optional[str] = None
    instructions: Optional[str] = None
    start_label: str = "Start Cleaning"
    next_step: Optional[CleanStep] = step_after(CleanStep.FINAL_CONFIRMATION)


StepView = Union[
    IntroStepView,
    ActionSelectionStepView,
    TimeRangeStepView,
    CleanInstructionsStepView,
    ConfirmationStepView,
]
CleanPageView = Union[NotAuthenticatedView, StepView]
