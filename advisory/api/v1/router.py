"""Root API router for v1 endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from advisory.api.v1 import health, navigation, payments, profiles, proposals
from advisory.core.config import get_config

api_router = APIRouter(prefix=get_config().API_PREFIX)
api_router.include_router(health.router)
api_router.include_router(navigation.router)
api_router.include_router(payments.router)
api_router.include_router(proposals.router)
api_router.include_router(profiles.router)


def get_api_router() -> APIRouter:
    return api_router
