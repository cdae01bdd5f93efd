from __future__ import annotations

import pytest
from fastapi import HTTPException

from advisory.api.v1 import profiles
from advisory.models import Profile


def test_profile_completion_for_advisor(seed_user, seed_advisor, auth_header):
    seed_user("adv-1", roles=["advisor"])
    seed_advisor("adv-1", location=None)

    response = profiles.get_profile_completion(authorization=auth_header("adv-1"))
    assert response.percentage == 80
    assert response.first_missing_field == "מיקום"
    assert response.is_complete is False


def test_profile_completion_without_advisor_row(seed_user, auth_header):
    seed_user("ent-1", roles=["entrepreneur"])

    response = profiles.get_profile_completion(authorization=auth_header("ent-1"))
    assert response.percentage == 0
    assert response.first_missing_field == "פרטי החברה"


def test_profile_completion_requires_auth():
    with pytest.raises(HTTPException) as exc:
        profiles.get_profile_completion(authorization=None)
    assert exc.value.status_code == 401


def test_accept_terms(db_session, seed_user, auth_header):
    seed_user("u1", roles=["entrepreneur"], tos_accepted=False)

    response = profiles.accept_terms(authorization=auth_header("u1"))
    assert response.user_id == "u1"
    assert response.tos_version == "3.0"

    stored = db_session.query(Profile).filter_by(user_id="u1").one()
    assert stored.tos_accepted_at is not None


def test_accept_terms_without_profile(seed_user, auth_header):
    seed_user("u2", roles=["entrepreneur"], profile=False)

    with pytest.raises(HTTPException) as exc:
        profiles.accept_terms(authorization=auth_header("u2"))
    assert exc.value.status_code == 404
