"""FastAPI routes for the notifier admin surface.

Thin adapters over the template registry, the user directory and the
dispatch read models. No business logic lives here.
"""

from fastapi import APIRouter, HTTPException, Response
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from notifier.api.schemas import (
    DispatchLogResponse,
    NotificationResultResponse,
    PreferencesResponse,
    PreviewRequest,
    PreviewResponse,
    StatsResponse,
    TemplateListResponse,
    TemplateRequest,
    TemplateResponse,
    UpdatePreferencesRequest,
)
from notifier.catalog import ChannelType
from notifier.notification.result import NotificationResult
from notifier.projections.delivery_stats import delivery_summary
from notifier.projections.dispatch_log import DispatchLog
from notifier.recipient import get_resolver
from notifier.templates import get_template_registry
from notifier.templates.renderer import render, unresolved_tokens
from notifier.templates.template import Template

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _to_template(body: TemplateRequest, template_id: str | None = None) -> Template:
    try:
        channel = ChannelType(body.channel)
    except ValueError:
        raise HTTPException(status_code=400, detail={"channel": [f"Unknown channel: {body.channel}"]})

    return Template(
        id=template_id or body.id,
        event_type=body.event_type,
        channel=channel,
        language=body.language,
        program_id=body.program_id,
        subject=body.subject,
        title=body.title,
        body=body.body,
        html_body=body.html_body,
        variables=frozenset(body.variables),
    )


def _store(template: Template) -> TemplateResponse:
    try:
        stored = get_template_registry().put(template)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.messages)
    return TemplateResponse(**stored.to_dict())


def _preferences(recipient) -> PreferencesResponse:
    prefs = recipient.preferences
    return PreferencesResponse(
        user_id=recipient.user_id,
        email=prefs.email,
        sms=prefs.sms,
        push=prefs.push,
        in_app=prefs.in_app,
        whatsapp=prefs.whatsapp,
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------
@router.get("/templates", response_model=TemplateListResponse)
async def list_templates(event_type: str | None = None) -> TemplateListResponse:
    templates = get_template_registry().list(event_type)
    return TemplateListResponse(templates=[TemplateResponse(**t.to_dict()) for t in templates])


@router.get("/templates/{event_type}/{channel}", response_model=TemplateResponse)
async def resolve_template(
    event_type: str,
    channel: str,
    language: str = "es",
    program_id: str | None = None,
) -> TemplateResponse:
    """Resolve the template that a dispatch would use, with program fallback."""
    template = get_template_registry().get(event_type, channel, language, program_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return TemplateResponse(**template.to_dict())


@router.post("/templates", status_code=201, response_model=TemplateResponse)
async def create_template(body: TemplateRequest) -> TemplateResponse:
    return _store(_to_template(body))


@router.put("/templates/{template_id}", response_model=TemplateResponse)
async def replace_template(template_id: str, body: TemplateRequest) -> TemplateResponse:
    return _store(_to_template(body, template_id=template_id))


@router.delete("/templates/{template_id}", status_code=204)
async def delete_template(template_id: str) -> Response:
    if not get_template_registry().delete(template_id):
        raise HTTPException(status_code=404, detail="Template not found")
    return Response(status_code=204)


@router.post("/templates/{template_id}/preview", response_model=PreviewResponse)
async def preview_template(template_id: str, body: PreviewRequest) -> PreviewResponse:
    """Render a stored template with sample variables. Nothing is sent."""
    template = get_template_registry().get_by_id(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")

    message = render(template, body.variables)
    return PreviewResponse(
        subject=message.subject,
        title=message.title,
        body=message.body,
        html_body=message.html_body,
        unresolved=sorted(unresolved_tokens(template, body.variables)),
    )


# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------
@router.get("/preferences/{user_id}", response_model=PreferencesResponse)
async def get_preferences(user_id: str) -> PreferencesResponse:
    recipient = get_resolver().resolve(user_id)
    if recipient is None:
        raise HTTPException(status_code=404, detail="User not found")
    return _preferences(recipient)


@router.put("/preferences/{user_id}", response_model=PreferencesResponse)
async def update_preferences(user_id: str, body: UpdatePreferencesRequest) -> PreferencesResponse:
    recipient = get_resolver().update_preferences(user_id, **body.model_dump())
    if recipient is None:
        raise HTTPException(status_code=404, detail="User not found")
    return _preferences(recipient)


# ---------------------------------------------------------------------------
# Dispatch audit
# ---------------------------------------------------------------------------
@router.get("/results/{notification_id}", response_model=NotificationResultResponse)
async def get_result(notification_id: str) -> NotificationResultResponse:
    try:
        result = current_domain.repository_for(NotificationResult).get(notification_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Notification not found")
    return NotificationResultResponse(**result.as_summary())


@router.get("/dispatches/{notification_id}", response_model=DispatchLogResponse)
async def get_dispatch(notification_id: str) -> DispatchLogResponse:
    try:
        log = current_domain.repository_for(DispatchLog).get(notification_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Notification not found")
    return DispatchLogResponse(
        notification_id=str(log.notification_id),
        event_id=log.event_id,
        event_type=log.event_type,
        status=log.status,
        total_sent=log.total_sent,
        total_failed=log.total_failed,
        processed_at=log.processed_at.isoformat() if log.processed_at else None,
    )


@router.get("/stats", response_model=StatsResponse)
async def get_stats() -> StatsResponse:
    return StatsResponse(**delivery_summary())
