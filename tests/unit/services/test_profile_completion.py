from __future__ import annotations

from advisory.services.profile_completion import (
    DEFAULT_MISSING_FIELD,
    calculate_profile_completion,
    completion_for_user,
)

ADVISOR = {"company_name": "Levi Engineering", "expertise": ["structure"], "location": "Haifa"}
USER = {"name": "Dana Levi", "phone": "050-1234567"}


def test_complete_profile():
    result = calculate_profile_completion(ADVISOR, USER)
    assert result.percentage == 100
    assert result.is_complete is True
    assert result.first_missing_field == ""
    assert result.completed_fields == result.total_fields == 5


def test_missing_company_name_is_reported_first():
    result = calculate_profile_completion({**ADVISOR, "company_name": None}, USER)
    assert result.first_missing_field == "שם החברה"
    assert result.percentage == 80
    assert result.is_complete is False


def test_first_missing_field_follows_declaration_order():
    advisor = {**ADVISOR, "expertise": [], "location": ""}
    user = {**USER, "phone": None}
    result = calculate_profile_completion(advisor, user)
    assert result.first_missing_field == "תחומי מומחיות"
    assert result.completed_fields == 2
    assert result.percentage == 40


def test_absent_profiles_short_circuit():
    for advisor, user in ((None, USER), (ADVISOR, None), (None, None)):
        result = calculate_profile_completion(advisor, user)
        assert result.percentage == 0
        assert result.is_complete is False
        assert result.first_missing_field == DEFAULT_MISSING_FIELD


def test_completion_for_user_reads_backend_rows(reader, seed_user, seed_advisor):
    seed_user("adv-1", roles=["advisor"], phone=None)
    seed_advisor("adv-1")

    result = completion_for_user(reader, "adv-1")
    assert result.percentage == 80
    assert result.first_missing_field == "טלפון"

    assert completion_for_user(reader, "nobody").first_missing_field == DEFAULT_MISSING_FIELD
