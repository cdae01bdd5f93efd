"""Payment status catalog and approval chain schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from advisory.core.enums import SignatureType


class PaymentStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    code: str
    name: str
    name_en: str | None = None
    description: str | None = None
    color: str
    icon: str | None = None
    is_system: bool
    is_terminal: bool
    display_order: int
    notify_on_enter: bool
    notify_roles: list[str] = Field(default_factory=list)
    requires_signature: bool
    signature_type: SignatureType


class NextStepResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    requires_signature: bool
    signature_type: SignatureType
    color: str


class ApprovalChainResponse(BaseModel):
    statuses: list[PaymentStatusResponse]
    total_steps: int
    error: str | None = None


class StatusProgressResponse(BaseModel):
    code: str
    is_known: bool
    is_terminal: bool
    current_step_index: int
    total_steps: int
    next_step: NextStepResponse | None = None
    error: str | None = None
