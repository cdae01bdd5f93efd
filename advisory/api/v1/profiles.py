"""Advisor profile completion and terms acceptance endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Header, HTTPException, status

from advisory.api.v1._authz import authenticate, map_auth_error
from advisory.core.dependencies import get_table_reader, get_terms_service
from advisory.core.exceptions import AuthenticationError, NotFoundError
from advisory.schemas.profiles import ProfileCompletionResponse, TermsAcceptanceResponse
from advisory.services.profile_completion import completion_for_user

router = APIRouter(tags=["profiles"])


@router.get("/advisors/me/profile-completion", response_model=ProfileCompletionResponse)
def get_profile_completion(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> ProfileCompletionResponse:
    with get_table_reader() as reader:
        try:
            session = authenticate(authorization, reader)
        except AuthenticationError as exc:
            code, detail = map_auth_error(exc)
            raise HTTPException(status_code=code, detail=detail) from exc
        completion = completion_for_user(reader, session.user_id)
    return ProfileCompletionResponse.model_validate(completion)


@router.post("/profile/terms/accept", response_model=TermsAcceptanceResponse)
def accept_terms(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> TermsAcceptanceResponse:
    with get_table_reader() as reader:
        try:
            session = authenticate(authorization, reader)
        except AuthenticationError as exc:
            code, detail = map_auth_error(exc)
            raise HTTPException(status_code=code, detail=detail) from exc

    with get_terms_service() as service:
        try:
            profile = service.accept_terms(session.user_id)
        except NotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        return TermsAcceptanceResponse.model_validate(profile)
