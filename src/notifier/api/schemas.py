"""Pydantic request/response models for the notifier admin API.

API schemas are kept separate from the domain records they map to.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class TemplateRequest(BaseModel):
    id: str = Field(..., examples=["slot-available-email-es"])
    event_type: str = Field(..., examples=["WaitingListSlotAvailable"])
    channel: str = Field(..., examples=["Email"], description="ChannelType value")
    language: str = Field(default="es", examples=["es"])
    program_id: str | None = None
    subject: str | None = None
    title: str | None = None
    body: str
    html_body: str | None = None
    variables: list[str] = Field(default_factory=list)


class PreviewRequest(BaseModel):
    variables: dict = Field(default_factory=dict)


class UpdatePreferencesRequest(BaseModel):
    email: bool | None = None
    sms: bool | None = None
    push: bool | None = None
    in_app: bool | None = None
    whatsapp: bool | None = None


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class TemplateResponse(BaseModel):
    id: str
    event_type: str
    channel: str
    language: str
    program_id: str | None = None
    subject: str | None = None
    title: str | None = None
    body: str
    html_body: str | None = None
    variables: list[str] = []


class TemplateListResponse(BaseModel):
    templates: list[TemplateResponse]


class PreviewResponse(BaseModel):
    subject: str | None = None
    title: str | None = None
    body: str
    html_body: str | None = None
    unresolved: list[str] = []


class PreferencesResponse(BaseModel):
    user_id: str
    email: bool
    sms: bool
    push: bool
    in_app: bool
    whatsapp: bool


class ChannelResultResponse(BaseModel):
    channel: str
    recipient_id: str
    status: str
    message_id: str | None = None
    error: str | None = None
    sent_at: str | None = None


class NotificationResultResponse(BaseModel):
    notification_id: str
    event_id: str
    event_type: str
    aggregate_id: str | None = None
    priority: str | None = None
    status: str
    total_sent: int
    total_failed: int
    channel_results: list[ChannelResultResponse]
    created_at: str | None = None
    processed_at: str | None = None


class DispatchLogResponse(BaseModel):
    notification_id: str
    event_id: str
    event_type: str
    status: str
    total_sent: int
    total_failed: int
    processed_at: str | None = None


class CountsResponse(BaseModel):
    sent: int = 0
    failed: int = 0


class StatsResponse(BaseModel):
    total_sent: int
    total_failed: int
    delivery_rate: float
    channel_stats: dict[str, CountsResponse]
    event_type_stats: dict[str, CountsResponse]
