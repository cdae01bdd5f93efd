from __future__ import annotations

import pytest

from advisory.core.exceptions import ValidationError
from advisory.database.init_db import DEFAULT_PAYMENT_STATUSES, seed_payment_statuses
from advisory.models import PaymentStatusDefinition


def test_fetch_filters_and_orders(reader, seed_versions):
    seed_versions(
        [
            {"proposal_id": "p1", "version_number": 2, "price": 20, "timeline_days": 2},
            {"proposal_id": "p1", "version_number": 1, "price": 10, "timeline_days": 1},
            {"proposal_id": "p2", "version_number": 1, "price": 30, "timeline_days": 3},
        ]
    )

    rows = reader.fetch("proposal_versions", filters={"proposal_id": "p1"}, order_by="version_number")
    assert [row["version_number"] for row in rows] == [1, 2]

    rows = reader.fetch("proposal_versions", order_by="price", descending=True)
    assert [row["price"] for row in rows] == [30, 20, 10]


def test_fetch_one_returns_none_when_nothing_matches(reader):
    assert reader.fetch_one("profiles", filters={"user_id": "ghost"}) is None


def test_unknown_table_is_rejected(reader):
    with pytest.raises(ValidationError, match="Unknown table"):
        reader.fetch("invoices")


def test_unknown_column_is_rejected(reader):
    with pytest.raises(ValidationError, match="Unknown column"):
        reader.fetch("profiles", filters={"password": "x"})
    with pytest.raises(ValidationError, match="Unknown column"):
        reader.fetch("profiles", order_by="password")


def test_seed_payment_statuses_is_idempotent(db_session, reader):
    assert seed_payment_statuses(db_session) == len(DEFAULT_PAYMENT_STATUSES)
    assert seed_payment_statuses(db_session) == 0

    rows = reader.fetch("payment_status_definitions", order_by="display_order")
    assert [row["code"] for row in rows] == ["prepared", "submitted", "approved", "paid", "rejected"]
    assert all(row["is_system"] for row in rows)


def test_seed_keeps_admin_edits(db_session):
    db_session.add(PaymentStatusDefinition(code="submitted", name="נשלח", display_order=7))
    db_session.commit()

    assert seed_payment_statuses(db_session) == len(DEFAULT_PAYMENT_STATUSES) - 1
    submitted = db_session.query(PaymentStatusDefinition).filter_by(code="submitted").one()
    assert submitted.name == "נשלח"
    assert submitted.display_order == 7
