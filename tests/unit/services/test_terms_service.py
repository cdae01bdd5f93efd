from __future__ import annotations

import pytest

from advisory.core.exceptions import NotFoundError
from advisory.services.terms_service import TermsService


def test_accept_terms_stamps_profile(db_session, seed_user):
    seed_user("u1", tos_accepted=False)
    service = TermsService(db=db_session, tos_version="3.0")

    profile = service.accept_terms("u1")
    assert profile.tos_accepted_at is not None
    assert profile.tos_version == "3.0"


def test_accept_terms_requires_profile(db_session):
    with pytest.raises(NotFoundError):
        TermsService(db=db_session, tos_version="3.0").accept_terms("ghost")


def test_service_leaves_borrowed_session_open(db_session, seed_user):
    seed_user("u1", tos_accepted=False)
    with TermsService(db=db_session, tos_version="3.0") as service:
        service.accept_terms("u1")

    assert db_session.is_active
    assert len(db_session.identity_map) > 0
