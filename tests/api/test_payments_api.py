from __future__ import annotations

import pytest
from fastapi import HTTPException

from advisory.api.v1 import payments
from advisory.core.enums import SignatureType
from advisory.database.init_db import seed_payment_statuses


@pytest.fixture
def caller(db_session, seed_user, auth_header):
    seed_payment_statuses(db_session)
    seed_user("adv-1", roles=["advisor"])
    return auth_header("adv-1")


def test_payment_statuses_require_auth():
    with pytest.raises(HTTPException) as exc:
        payments.list_payment_statuses(authorization=None)
    assert exc.value.status_code == 401


def test_list_payment_statuses(caller):
    response = payments.list_payment_statuses(authorization=caller)
    assert [s.code for s in response.statuses] == ["prepared", "submitted", "approved", "paid", "rejected"]
    assert response.total_steps == 3
    assert response.error is None


def test_status_progress_reports_next_step(caller):
    response = payments.get_status_progress("submitted", authorization=caller)
    assert response.is_known is True
    assert response.current_step_index == 1
    assert response.next_step.code == "approved"
    assert response.next_step.requires_signature is True
    assert response.next_step.signature_type is SignatureType.CHECKBOX


def test_status_progress_for_end_of_chain(caller):
    response = payments.get_status_progress("approved", authorization=caller)
    assert response.next_step is None

    terminal = payments.get_status_progress("paid", authorization=caller)
    assert terminal.is_terminal is True
    assert terminal.current_step_index == -1


def test_status_progress_for_unknown_code(caller):
    response = payments.get_status_progress("nope", authorization=caller)
    assert response.is_known is False
    assert response.is_terminal is False
    assert response.current_step_index == -1
    assert response.next_step is None


def test_payment_statuses_reject_non_ascii_token():
    with pytest.raises(HTTPException) as exc:
        payments.list_payment_statuses(authorization="Bearer a.b.é")
    assert exc.value.status_code == 401
