"""Canonical enum values shared by auth, services and persistence."""

from __future__ import annotations

import enum


class Role(str, enum.Enum):
    """Roles a platform user can hold. A user may hold several."""

    ADMIN = "admin"
    ADVISOR = "advisor"
    ENTREPRENEUR = "entrepreneur"
    SUPPLIER = "supplier"


class SignatureType(str, enum.Enum):
    NONE = "none"
    CHECKBOX = "checkbox"
    DRAWN = "drawn"
    UPLOADED = "uploaded"


class GuardOutcome(str, enum.Enum):
    """What a route guard tells the presentation layer to do."""

    RENDER = "render"
    REDIRECT = "redirect"
    LOADING = "loading"
    TERMS_REQUIRED = "terms_required"
