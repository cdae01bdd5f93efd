"""Role priority and role-based navigation.

This module is the single source of truth for which of a user's roles wins
and where each role lands after login or logout. The route tables are keyed
by every ``Role`` member; adding a role without a route fails at import.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from advisory.core.enums import Role
from advisory.core.exceptions import ConfigurationError

#: Roles ordered from highest to lowest priority.
ROLE_PRIORITY: tuple[Role, ...] = (
    Role.ADMIN,
    Role.ADVISOR,
    Role.ENTREPRENEUR,
    Role.SUPPLIER,
)

ROOT_ROUTE = "/"
ADMIN_LOGIN_ROUTE = "/heyadmin/login"
AUTH_ROUTE = "/auth"

# Suppliers have no dashboard yet and land on the root page, same as no role.
DASHBOARD_ROUTES: dict[Role, str] = {
    Role.ADMIN: "/heyadmin",
    Role.ADVISOR: "/advisor-dashboard",
    Role.ENTREPRENEUR: "/dashboard",
    Role.SUPPLIER: ROOT_ROUTE,
}

DEFAULT_LOGIN_ROUTE = "/auth?mode=login&type=entrepreneur&logged_out=1"

LOGIN_ROUTES: dict[Role, str] = {
    Role.ADMIN: ADMIN_LOGIN_ROUTE,
    Role.ADVISOR: "/auth?mode=login&type=advisor&logged_out=1",
    Role.ENTREPRENEUR: DEFAULT_LOGIN_ROUTE,
    Role.SUPPLIER: DEFAULT_LOGIN_ROUTE,
}


def _require_every_role(name: str, table: Mapping[Role, str]) -> None:
    missing = [role.value for role in Role if role not in table]
    if missing:
        raise ConfigurationError(f"{name} has no entry for: {', '.join(missing)}")


_require_every_role("DASHBOARD_ROUTES", DASHBOARD_ROUTES)
_require_every_role("LOGIN_ROUTES", LOGIN_ROUTES)
if len(ROLE_PRIORITY) != len(Role) or set(ROLE_PRIORITY) != set(Role):
    raise ConfigurationError("ROLE_PRIORITY must rank every role exactly once.")


def parse_roles(values: Iterable[str | Role]) -> frozenset[Role]:
    """Convert raw role strings to ``Role`` members, dropping unknown values."""
    roles: set[Role] = set()
    for value in values:
        try:
            roles.add(value if isinstance(value, Role) else Role(str(value).strip().lower()))
        except ValueError:
            continue
    return frozenset(roles)


def get_primary_role(roles: Iterable[str | Role]) -> Role | None:
    """Return the highest-priority role present, or ``None`` for no roles."""
    held = parse_roles(roles)
    for role in ROLE_PRIORITY:
        if role in held:
            return role
    return None


def get_dashboard_route_for_role(role: Role | None) -> str:
    """Return the dashboard path for *role*; no role lands on the root page."""
    if role is None:
        return ROOT_ROUTE
    return DASHBOARD_ROUTES[role]


def get_login_route_for_role(role: Role | None) -> str:
    """Return the login path used after sign-out for *role*."""
    if role is None:
        return DEFAULT_LOGIN_ROUTE
    return LOGIN_ROUTES.get(role, DEFAULT_LOGIN_ROUTE)
