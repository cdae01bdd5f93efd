"""Profile completion and terms acceptance schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProfileCompletionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    percentage: int = Field(ge=0, le=100)
    is_complete: bool
    first_missing_field: str
    total_fields: int
    completed_fields: int


class TermsAcceptanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    tos_accepted_at: datetime
    tos_version: str
