"""Explicit auth session context passed to guards and resolvers."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from advisory.auth.roles import get_primary_role, parse_roles
from advisory.core.enums import Role
from advisory.core.exceptions import AdvisoryException
from advisory.database.table_reader import TableReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserProfile:
    user_id: str
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    company_name: str | None = None
    tos_accepted_at: datetime | None = None
    tos_version: str | None = None
    requires_password_change: bool | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "UserProfile":
        return cls(
            user_id=str(row["user_id"]),
            name=row.get("name"),
            phone=row.get("phone"),
            email=row.get("email"),
            company_name=row.get("company_name"),
            tos_accepted_at=row.get("tos_accepted_at"),
            tos_version=row.get("tos_version"),
            requires_password_change=row.get("requires_password_change"),
        )


@dataclass(frozen=True)
class AuthSession:
    """Snapshot of who is signed in and what they may do.

    ``loading`` means the backend has not finished resolving the user, their
    profile or their roles; guards must not decide anything while it is set.
    ``profile_resolved`` is false when the profile read failed, as opposed to
    the user having no profile row.
    """

    user_id: str | None = None
    roles: frozenset[Role] = field(default_factory=frozenset)
    profile: UserProfile | None = None
    loading: bool = False
    profile_resolved: bool = True

    @classmethod
    def anonymous(cls) -> "AuthSession":
        return cls()

    @classmethod
    def pending(cls) -> "AuthSession":
        return cls(loading=True)

    @classmethod
    def for_user(
        cls,
        user_id: str,
        roles: Iterable[str | Role] = (),
        profile: UserProfile | None = None,
    ) -> "AuthSession":
        return cls(user_id=user_id, roles=parse_roles(roles), profile=profile)

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def primary_role(self) -> Role | None:
        return get_primary_role(self.roles)

    @property
    def is_admin(self) -> bool:
        return Role.ADMIN in self.roles

    def has_role(self, role: Role) -> bool:
        return role in self.roles


def load_session(reader: TableReader, user_id: str) -> AuthSession:
    """Resolve roles and profile for *user_id* from the backend tables.

    Read failures leave the user signed in with no roles and an unresolved
    profile, so role-gated routes redirect and the terms gate stays closed.
    """
    try:
        role_rows = reader.fetch("user_roles", filters={"user_id": user_id})
        profile_row = reader.fetch_one("profiles", filters={"user_id": user_id})
    except AdvisoryException:
        logger.exception(
            "auth.session.load_failed",
            extra={"event": "auth.session.load_failed"},
        )
        return AuthSession(user_id=user_id, profile_resolved=False)

    profile = UserProfile.from_row(profile_row) if profile_row else None
    return AuthSession.for_user(
        user_id=user_id,
        roles=[row["role"] for row in role_rows],
        profile=profile,
    )
