from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from advisory.auth.jwt import create_access_token
from advisory.core.config import get_config
from advisory.database.table_reader import TableReader
from advisory.models import Advisor, Base, PaymentStatusDefinition, Profile, ProposalVersion, UserRoleAssignment


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def reader(db_session):
    return TableReader(db=db_session)


@pytest.fixture
def seed_user(db_session):
    def _seed(user_id, roles=(), name="Dana Levi", phone="050-1234567", tos_accepted=True, profile=True):
        for role in roles:
            db_session.add(UserRoleAssignment(user_id=user_id, role=role))
        if profile:
            db_session.add(
                Profile(
                    user_id=user_id,
                    email=f"{user_id}@example.com",
                    name=name,
                    phone=phone,
                    tos_accepted_at=datetime(2026, 1, 1, tzinfo=timezone.utc) if tos_accepted else None,
                    tos_version="3.0" if tos_accepted else None,
                )
            )
        db_session.commit()
        return user_id

    return _seed


@pytest.fixture
def seed_advisor(db_session):
    def _seed(user_id, company_name="Levi Engineering", expertise=("structure",), location="Tel Aviv"):
        db_session.add(
            Advisor(
                user_id=user_id,
                company_name=company_name,
                expertise=list(expertise),
                location=location,
            )
        )
        db_session.commit()

    return _seed


@pytest.fixture
def seed_statuses(db_session):
    def _seed(rows):
        for row in rows:
            db_session.add(PaymentStatusDefinition(**row))
        db_session.commit()

    return _seed


@pytest.fixture
def seed_versions(db_session):
    def _seed(rows):
        for row in rows:
            db_session.add(ProposalVersion(**row))
        db_session.commit()

    return _seed


@pytest.fixture
def auth_header():
    def _header(user_id):
        token = create_access_token(user_id, secret=get_config().JWT_SECRET)
        return f"Bearer {token}"

    return _header
