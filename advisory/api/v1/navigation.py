"""Role navigation and route-guard endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Header

from advisory.api.v1._authz import resolve_session
from advisory.auth.guards import AdminGuard, RoleGuard, RouteGuard
from advisory.auth.roles import get_dashboard_route_for_role, get_login_route_for_role
from advisory.core.dependencies import get_table_reader
from advisory.schemas.navigation import GuardDecisionResponse, GuardRequest, NavigationResponse

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("", response_model=NavigationResponse)
def get_navigation(authorization: str | None = Header(default=None, alias="Authorization")) -> NavigationResponse:
    with get_table_reader() as reader:
        session = resolve_session(authorization, reader)

    primary = session.primary_role
    return NavigationResponse(
        is_authenticated=session.is_authenticated,
        roles=sorted(session.roles, key=lambda role: role.value),
        primary_role=primary,
        dashboard_route=get_dashboard_route_for_role(primary),
        login_route=get_login_route_for_role(primary),
    )


@router.post("/guard", response_model=GuardDecisionResponse)
def evaluate_guard(
    payload: GuardRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> GuardDecisionResponse:
    with get_table_reader() as reader:
        session = resolve_session(authorization, reader)

    guard: RouteGuard
    if payload.guard == "admin":
        guard = AdminGuard()
    else:
        guard = RoleGuard(payload.allowed_roles, redirect_to=payload.redirect_to)

    decision = guard.evaluate(session)
    return GuardDecisionResponse(outcome=decision.outcome, location=decision.location)
