from __future__ import annotations

import pytest
from fastapi import HTTPException

from advisory.api.v1 import proposals


@pytest.fixture
def caller(seed_user, seed_versions, auth_header):
    seed_user("ent-1", roles=["entrepreneur"])
    seed_versions(
        [
            {"id": "v1", "proposal_id": "p1", "version_number": 1, "price": 10000, "timeline_days": 90},
            {"id": "v2", "proposal_id": "p1", "version_number": 2, "price": 8500, "timeline_days": 120},
        ]
    )
    return auth_header("ent-1")


def test_versions_require_auth():
    with pytest.raises(HTTPException) as exc:
        proposals.list_versions("p1", authorization="Basic abc")
    assert exc.value.status_code == 401


def test_list_versions_most_recent_first(caller):
    response = proposals.list_versions("p1", authorization=caller)
    assert [item.id for item in response.items] == ["v2", "v1"]
    assert response.total == 2
    assert response.latest_version_id == "v2"


def test_list_versions_for_unknown_proposal(caller):
    response = proposals.list_versions("p404", authorization=caller)
    assert response.items == []
    assert response.latest_version_id is None


def test_compare_versions_endpoint(caller):
    response = proposals.compare_proposal_versions(
        "p1", from_version="v1", to_version="v2", authorization=caller
    )
    assert response.price_change == -1500
    assert response.price_change_percent == -15
    assert response.timeline_change == 30


def test_compare_versions_missing_version(caller):
    with pytest.raises(HTTPException) as exc:
        proposals.compare_proposal_versions("p1", from_version="v1", to_version="v9", authorization=caller)
    assert exc.value.status_code == 404
