"""Navigation and route-guard schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from advisory.core.enums import GuardOutcome, Role


class NavigationResponse(BaseModel):
    is_authenticated: bool
    roles: list[Role] = Field(default_factory=list)
    primary_role: Role | None = None
    dashboard_route: str
    login_route: str


class GuardRequest(BaseModel):
    guard: Literal["admin", "role"]
    allowed_roles: list[Role] = Field(default_factory=list)
    redirect_to: str | None = Field(default=None, min_length=1, max_length=500)


class GuardDecisionResponse(BaseModel):
    outcome: GuardOutcome
    location: str | None = None
