"""View models for the reply tracker list, detail pane and empty/loading states."""

from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, computed_field

from inbox_assist.config import REFRESH_RESET_MS


class SelectedEmail(BaseModel):
    thread_id: str
    message_id: str


class RowControl(BaseModel):
    kind: Literal["resolve", "unresolve", "nudge", "reply"]
    label: str
    thread_id: str
    message_id: Optional[str] = None
    resolved: Optional[bool] = None  # target value for resolve/unresolve
    loading: bool = False


class TrackerRow(BaseModel):
    thread_id: str
    message_id: str
    from_: str = Field("", serialization_alias="from")
    subject: str = ""
    snippet: str = ""
    received_at: datetime
    controls: list[RowControl] = Field(default_factory=list)


class PaginationView(BaseModel):
    page: int = 1
    total_pages: int = 1

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class ListView(BaseModel):
    view: Literal["list"] = "list"
    rows: list[TrackerRow] = Field(default_factory=list)
    pagination: PaginationView = PaginationView()


class PaneSize(BaseModel):
    default_size: int
    min_size: int = 35


class ThreadViewerPane(BaseModel):
    thread_id: str
    auto_open_reply_for_message_id: str
    show_reply_button: bool = True
    user_email: str
    size: PaneSize = PaneSize(default_size=60)


class SplitView(BaseModel):
    view: Literal["split"] = "split"
    direction: Literal["horizontal"] = "horizontal"
    list_view: ListView
    list_size: PaneSize = PaneSize(default_size=40)
    viewer: ThreadViewerPane


class RefreshControl(BaseModel):
    label: str = "Refresh"
    loading: bool = False
    reset_after_ms: int = REFRESH_RESET_MS


class EmptyStateView(BaseModel):
    view: Literal["empty"] = "empty"
    message: str
    analyzing: bool = False
    refresh: Optional[RefreshControl] = None


class LoadingView(BaseModel):
    view: Literal["loading"] = "loading"


ReplyTrackerView = Union[LoadingView, EmptyStateView, ListView, SplitView]
