"""Payment status catalog and approval chain endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Header, HTTPException

from advisory.api.v1._authz import authenticate, map_auth_error
from advisory.core.dependencies import get_table_reader
from advisory.core.exceptions import AuthenticationError
from advisory.schemas.payments import (
    ApprovalChainResponse,
    NextStepResponse,
    PaymentStatusResponse,
    StatusProgressResponse,
)
from advisory.services.approval_chain import ApprovalChain

router = APIRouter(prefix="/payment-statuses", tags=["payments"])


def _load_chain(authorization: str | None) -> ApprovalChain:
    with get_table_reader() as reader:
        try:
            authenticate(authorization, reader)
        except AuthenticationError as exc:
            code, detail = map_auth_error(exc)
            raise HTTPException(status_code=code, detail=detail) from exc
        chain = ApprovalChain.from_reader(reader)
        chain.refresh()
    return chain


@router.get("", response_model=ApprovalChainResponse)
def list_payment_statuses(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> ApprovalChainResponse:
    chain = _load_chain(authorization)
    return ApprovalChainResponse(
        statuses=[PaymentStatusResponse.model_validate(status) for status in chain.statuses],
        total_steps=chain.total_steps,
        error=chain.error,
    )


@router.get("/{code}/next", response_model=StatusProgressResponse)
def get_status_progress(
    code: str,
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> StatusProgressResponse:
    chain = _load_chain(authorization)
    next_step = chain.get_next_step(code)
    return StatusProgressResponse(
        code=code,
        is_known=chain.get_status_by_code(code) is not None,
        is_terminal=chain.is_terminal(code),
        current_step_index=chain.current_step_index(code),
        total_steps=chain.total_steps,
        next_step=NextStepResponse.model_validate(next_step) if next_step else None,
        error=chain.error,
    )
