"""
Pydantic schemas for the calls API.

POST /api/calls deliberately reads the raw body and runs validate_call_event
so its error messages stay deterministic; only the preview endpoint uses
request-model validation.
"""

from pydantic import BaseModel, ConfigDict, Field

from callagent.calls.models import CallDirection


class PreviewRequest(BaseModel):
    """Render a message without sending it."""

    model_config = ConfigDict(populate_by_name=True)

    direction: CallDirection
    caller_number: str | None = Field(default=None, alias="callerNumber")
    recipient_number: str | None = Field(default=None, alias="recipientNumber")
    custom_message: str | None = Field(default=None, alias="customMessage")


class PreviewData(BaseModel):
    direction: CallDirection
    label: str
    template: str
    rendered_message: str = Field(serialization_alias="renderedMessage")


class PreviewResponse(BaseModel):
    success: bool = True
    data: PreviewData


class TemplateInfo(BaseModel):
    direction: CallDirection
    label: str
    description: str
    default_template: str = Field(serialization_alias="defaultTemplate")


class TemplateCatalogResponse(BaseModel):
    success: bool = True
    placeholders: list[str]
    data: list[TemplateInfo]
