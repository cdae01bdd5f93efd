from __future__ import annotations

import pytest

from advisory.api.v1 import navigation, payments, profiles, proposals
from advisory.database.table_reader import TableReader
from advisory.services.terms_service import TermsService


@pytest.fixture(autouse=True)
def bind_endpoints(monkeypatch, db_session):
    def _reader():
        return TableReader(db=db_session)

    for module in (navigation, payments, profiles, proposals):
        monkeypatch.setattr(module, "get_table_reader", _reader)
    monkeypatch.setattr(profiles, "get_terms_service", lambda: TermsService(db=db_session, tos_version="3.0"))
