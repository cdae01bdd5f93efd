"""Advisor profile completion percentage and first missing field."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from advisory.database.table_reader import TableReader

DEFAULT_MISSING_FIELD = "פרטי החברה"

Row = Mapping[str, Any]


@dataclass(frozen=True)
class CompletionField:
    key: str
    label: str
    is_present: Callable[[Row, Row], bool]


# Order matters: the first missing field is the one surfaced to the advisor.
REQUIRED_FIELDS: tuple[CompletionField, ...] = (
    CompletionField("company_name", "שם החברה", lambda advisor, user: bool(advisor.get("company_name"))),
    CompletionField("expertise", "תחומי מומחיות", lambda advisor, user: len(advisor.get("expertise") or ()) > 0),
    CompletionField("location", "מיקום", lambda advisor, user: bool(advisor.get("location"))),
    CompletionField("name", "שם מלא", lambda advisor, user: bool(user.get("name"))),
    CompletionField("phone", "טלפון", lambda advisor, user: bool(user.get("phone"))),
)


@dataclass(frozen=True)
class ProfileCompletion:
    percentage: int
    is_complete: bool
    first_missing_field: str
    total_fields: int
    completed_fields: int


def calculate_profile_completion(
    advisor_profile: Row | None,
    user_profile: Row | None,
) -> ProfileCompletion:
    total = len(REQUIRED_FIELDS)
    if not advisor_profile or not user_profile:
        return ProfileCompletion(
            percentage=0,
            is_complete=False,
            first_missing_field=DEFAULT_MISSING_FIELD,
            total_fields=total,
            completed_fields=0,
        )

    missing = [f for f in REQUIRED_FIELDS if not f.is_present(advisor_profile, user_profile)]
    completed = total - len(missing)
    percentage = int(completed * 100 / total + 0.5)
    return ProfileCompletion(
        percentage=percentage,
        is_complete=percentage == 100,
        first_missing_field=missing[0].label if missing else "",
        total_fields=total,
        completed_fields=completed,
    )


def completion_for_user(reader: TableReader, user_id: str) -> ProfileCompletion:
    """Load the advisor and user profile rows for *user_id* and score them."""
    advisor = reader.fetch_one("advisors", filters={"user_id": user_id})
    profile = reader.fetch_one("profiles", filters={"user_id": user_id})
    return calculate_profile_completion(advisor, profile)
