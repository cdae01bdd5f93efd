"""Create backend tables and seed the default payment status catalog.

Production schemas are owned by the managed backend; this module exists for
local SQLite runs and tests.
"""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

import advisory.database.db as db_module
from advisory.core.enums import SignatureType
from advisory.models import Base, PaymentStatusDefinition

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_STATUSES: tuple[dict, ...] = (
    {"code": "prepared", "name": "טיוטה", "name_en": "Prepared", "color": "#6B7280", "display_order": 0},
    {"code": "submitted", "name": "הוגש", "name_en": "Submitted", "color": "#3B82F6", "display_order": 1},
    {
        "code": "approved",
        "name": "אושר",
        "name_en": "Approved",
        "color": "#10B981",
        "display_order": 2,
        "requires_signature": True,
        "signature_type": SignatureType.CHECKBOX.value,
    },
    {"code": "paid", "name": "שולם", "name_en": "Paid", "color": "#22C55E", "display_order": 3, "is_terminal": True},
    {"code": "rejected", "name": "נדחה", "name_en": "Rejected", "color": "#EF4444", "display_order": 4, "is_terminal": True},
)


def create_tables(engine: Engine | None = None) -> None:
    Base.metadata.create_all(bind=engine or db_module.get_engine())


def seed_payment_statuses(session: Session) -> int:
    """Insert missing default statuses; return how many were added."""
    existing = {code for (code,) in session.query(PaymentStatusDefinition.code).all()}
    added = 0
    for values in DEFAULT_PAYMENT_STATUSES:
        if values["code"] in existing:
            continue
        session.add(PaymentStatusDefinition(is_system=True, **values))
        added += 1
    session.commit()
    return added


def init_db() -> None:
    create_tables()
    with db_module.get_db_session() as session:
        added = seed_payment_statuses(session)
    logger.info("database.initialized", extra={"event": "database.initialized", "statuses_added": added})


if __name__ == "__main__":
    from advisory.core.logging_config import configure_logging

    configure_logging()
    init_db()
