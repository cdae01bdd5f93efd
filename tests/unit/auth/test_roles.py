from __future__ import annotations

from itertools import combinations

import pytest

from advisory.auth.roles import (
    DASHBOARD_ROUTES,
    LOGIN_ROUTES,
    ROLE_PRIORITY,
    get_dashboard_route_for_role,
    get_login_route_for_role,
    get_primary_role,
    parse_roles,
)
from advisory.core.enums import Role


def _all_subsets():
    members = list(Role)
    for size in range(len(members) + 1):
        for subset in combinations(members, size):
            yield set(subset)


def test_primary_role_is_highest_priority_member_of_every_subset():
    for subset in _all_subsets():
        expected = next((role for role in ROLE_PRIORITY if role in subset), None)
        assert get_primary_role(subset) is expected


def test_primary_role_of_empty_set_is_none():
    assert get_primary_role(set()) is None
    assert get_primary_role([]) is None


def test_primary_role_accepts_raw_strings_and_ignores_unknown_values():
    assert get_primary_role(["supplier", "Advisor", "accountant"]) is Role.ADVISOR
    assert get_primary_role(["accountant"]) is None


def test_parse_roles_drops_unknown_values():
    assert parse_roles(["admin", "nope", Role.SUPPLIER]) == frozenset({Role.ADMIN, Role.SUPPLIER})


@pytest.mark.parametrize(
    "role, expected",
    [
        (Role.ADMIN, "/heyadmin"),
        (Role.ADVISOR, "/advisor-dashboard"),
        (Role.ENTREPRENEUR, "/dashboard"),
        (Role.SUPPLIER, "/"),
        (None, "/"),
    ],
)
def test_dashboard_route_for_role(role, expected):
    assert get_dashboard_route_for_role(role) == expected


@pytest.mark.parametrize(
    "role, expected",
    [
        (Role.ADMIN, "/heyadmin/login"),
        (Role.ADVISOR, "/auth?mode=login&type=advisor&logged_out=1"),
        (Role.ENTREPRENEUR, "/auth?mode=login&type=entrepreneur&logged_out=1"),
        (Role.SUPPLIER, "/auth?mode=login&type=entrepreneur&logged_out=1"),
        (None, "/auth?mode=login&type=entrepreneur&logged_out=1"),
    ],
)
def test_login_route_for_role(role, expected):
    assert get_login_route_for_role(role) == expected


def test_route_tables_cover_every_role():
    assert set(DASHBOARD_ROUTES) == set(Role)
    assert set(LOGIN_ROUTES) == set(Role)
    assert sorted(ROLE_PRIORITY, key=lambda r: r.value) == sorted(Role, key=lambda r: r.value)
