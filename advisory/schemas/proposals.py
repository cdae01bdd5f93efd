"""Proposal version schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ProposalVersionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    proposal_id: str
    version_number: int
    price: float
    timeline_days: int
    scope_text: str | None = None
    terms: str | None = None
    change_reason: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None


class ProposalVersionListResponse(BaseModel):
    items: list[ProposalVersionResponse]
    total: int
    latest_version_id: str | None = None
    error: str | None = None


class VersionComparisonResponse(BaseModel):
    from_version_id: str
    to_version_id: str
    price_change: float
    price_change_percent: int
    timeline_change: int
