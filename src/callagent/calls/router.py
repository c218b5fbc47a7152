"""
API router for call-event notifications.
"""

from json import JSONDecodeError
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from callagent.calls.dispatcher import NotificationDispatcher, get_notification_dispatcher
from callagent.calls.models import CallDirection
from callagent.calls.schemas import (
    PreviewData,
    PreviewRequest,
    PreviewResponse,
    TemplateCatalogResponse,
    TemplateInfo,
)
from callagent.calls.templates import (
    DEFAULT_TEMPLATES,
    DIRECTION_DESCRIPTIONS,
    DIRECTION_LABELS,
    PLACEHOLDERS,
    render_preview,
)
from callagent.shared.exceptions import ValidationError
from callagent.shared.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/calls", tags=["calls"])

MESSAGE_SENT = "Notification sent"
MESSAGE_SIMULATED = "Notification simulated (Twilio dry-run mode)"


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Send a call-event SMS notification",
    description="Validate the call event, render its template and send it to "
    "the caller. Without provider credentials, or when the provider fails, "
    "the send is simulated and reported as a dry-run.",
)
async def send_call_notification(
    request: Request,
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
) -> Any:
    try:
        raw = await request.json()
    except (JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError("request body must be valid JSON") from e

    try:
        result = await dispatcher.notify(raw)
    except ValidationError:
        raise
    except Exception as e:
        logger.exception("Failed to send call notification")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": str(e) or "Unknown error"},
        )

    return {
        "success": True,
        "message": MESSAGE_SIMULATED if result.dry_run else MESSAGE_SENT,
        "data": result.to_dict(),
    }


@router.get(
    "/templates",
    response_model=TemplateCatalogResponse,
    summary="List directions with their labels and default templates",
)
async def list_templates() -> TemplateCatalogResponse:
    return TemplateCatalogResponse(
        placeholders=list(PLACEHOLDERS),
        data=[
            TemplateInfo(
                direction=direction,
                label=DIRECTION_LABELS[direction],
                description=DIRECTION_DESCRIPTIONS[direction],
                default_template=DEFAULT_TEMPLATES[direction],
            )
            for direction in CallDirection
        ],
    )


@router.post(
    "/preview",
    response_model=PreviewResponse,
    summary="Render a message without sending it",
    description="Blank numbers fall back to sample numbers and a blank "
    "template falls back to the direction's default template.",
)
async def preview_message(payload: PreviewRequest) -> PreviewResponse:
    template, rendered = render_preview(
        payload.direction,
        template=payload.custom_message,
        caller_number=payload.caller_number,
        recipient_number=payload.recipient_number,
    )
    return PreviewResponse(
        data=PreviewData(
            direction=payload.direction,
            label=DIRECTION_LABELS[payload.direction],
            template=template,
            rendered_message=rendered,
        )
    )
