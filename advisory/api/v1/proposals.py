"""Proposal version history endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Header, HTTPException, Query, status

from advisory.api.v1._authz import authenticate, map_auth_error
from advisory.core.dependencies import get_table_reader
from advisory.core.exceptions import AuthenticationError
from advisory.schemas.proposals import (
    ProposalVersionListResponse,
    ProposalVersionResponse,
    VersionComparisonResponse,
)
from advisory.services.proposal_versions import ProposalVersionHistory

router = APIRouter(prefix="/proposals", tags=["proposals"])


def _load_history(proposal_id: str, authorization: str | None) -> ProposalVersionHistory:
    with get_table_reader() as reader:
        try:
            authenticate(authorization, reader)
        except AuthenticationError as exc:
            code, detail = map_auth_error(exc)
            raise HTTPException(status_code=code, detail=detail) from exc
        history = ProposalVersionHistory.from_reader(reader, proposal_id)
        history.refresh()
    return history


@router.get("/{proposal_id}/versions", response_model=ProposalVersionListResponse)
def list_versions(
    proposal_id: str,
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> ProposalVersionListResponse:
    history = _load_history(proposal_id, authorization)
    latest = history.get_latest_version()
    return ProposalVersionListResponse(
        items=[ProposalVersionResponse.model_validate(v) for v in history.versions],
        total=len(history.versions),
        latest_version_id=latest.id if latest else None,
        error=history.error,
    )


@router.get("/{proposal_id}/versions/compare", response_model=VersionComparisonResponse)
def compare_proposal_versions(
    proposal_id: str,
    from_version: str = Query(min_length=1),
    to_version: str = Query(min_length=1),
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> VersionComparisonResponse:
    history = _load_history(proposal_id, authorization)
    v1 = history.get_version_by_id(from_version)
    v2 = history.get_version_by_id(to_version)
    if v1 is None or v2 is None:
        missing = from_version if v1 is None else to_version
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Version not found: {missing}")

    comparison = history.compare_versions(v1, v2)
    return VersionComparisonResponse(
        from_version_id=v1.id,
        to_version_id=v2.id,
        price_change=comparison.price_change,
        price_change_percent=comparison.price_change_percent,
        timeline_change=comparison.timeline_change,
    )
