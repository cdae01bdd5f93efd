"""Route guards deciding whether a page subtree renders or redirects.

Every guard answers the same question for an ``AuthSession``: render the
protected content, show a loading placeholder, block on terms acceptance, or
redirect elsewhere. A session that is still loading never causes a redirect;
a resolved session that is unauthenticated or lacks the role never renders.
"""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from advisory.auth.roles import (
    ADMIN_LOGIN_ROUTE,
    AUTH_ROUTE,
    get_dashboard_route_for_role,
    get_login_route_for_role,
    parse_roles,
)
from advisory.auth.session import AuthSession
from advisory.core.config import get_config
from advisory.core.enums import GuardOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuardDecision:
    outcome: GuardOutcome
    location: str | None = None

    @classmethod
    def render(cls) -> "GuardDecision":
        return cls(GuardOutcome.RENDER)

    @classmethod
    def loading(cls) -> "GuardDecision":
        return cls(GuardOutcome.LOADING)

    @classmethod
    def terms_required(cls) -> "GuardDecision":
        return cls(GuardOutcome.TERMS_REQUIRED)

    @classmethod
    def redirect(cls, location: str) -> "GuardDecision":
        return cls(GuardOutcome.REDIRECT, location)

    @property
    def renders(self) -> bool:
        return self.outcome is GuardOutcome.RENDER


class RouteGuard(ABC):
    """Common interface of the three guard variants."""

    name = "guard"

    @abstractmethod
    def evaluate(self, session: AuthSession) -> GuardDecision:
        raise NotImplementedError

    def _redirect(self, session: AuthSession, location: str) -> GuardDecision:
        logger.debug(
            "guard.redirect",
            extra={
                "event": "guard.redirect",
                "guard": self.name,
                "user_id": session.user_id,
                "location": location,
            },
        )
        return GuardDecision.redirect(location)


class AdminGuard(RouteGuard):
    """Admin-only pages.

    Non-admins go to the login page of their own primary role, never to the
    admin login, so a signed-in advisor is not invited to sign in as admin.
    """

    name = "admin"

    def evaluate(self, session: AuthSession) -> GuardDecision:
        if session.loading:
            return GuardDecision.loading()
        if not session.is_authenticated:
            return self._redirect(session, ADMIN_LOGIN_ROUTE)
        if not session.is_admin:
            return self._redirect(session, get_login_route_for_role(session.primary_role))
        return GuardDecision.render()


class RoleGuard(RouteGuard):
    """Pages restricted to an explicit allow-list of primary roles."""

    name = "role"

    def __init__(self, allowed_roles: Iterable[str], redirect_to: str | None = None) -> None:
        self.allowed_roles = parse_roles(allowed_roles)
        self.redirect_to = redirect_to

    def evaluate(self, session: AuthSession) -> GuardDecision:
        if session.loading:
            return GuardDecision.loading()
        primary = session.primary_role
        if primary is None or primary not in self.allowed_roles:
            return self._redirect(session, self.redirect_to or get_dashboard_route_for_role(primary))
        return GuardDecision.render()


class AuthenticatedGuard(RouteGuard):
    """Pages for any signed-in user, behind the terms-of-service gate.

    A signed-out state is only acted on after ``grace_seconds`` so a session
    that is still hydrating does not bounce the user to the login page. The
    pending redirect belongs to the ``(loading, user_id)`` pair it was started
    for; any change of that pair cancels it.
    """

    name = "authenticated"

    def __init__(
        self,
        grace_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        on_redirect: Callable[[str], None] | None = None,
        require_terms: bool = True,
        login_route: str = AUTH_ROUTE,
    ) -> None:
        self.grace_seconds = get_config().auth_grace_seconds if grace_seconds is None else grace_seconds
        self.login_route = login_route
        self.require_terms = require_terms
        self._clock = clock
        self._on_redirect = on_redirect
        self._lock = threading.Lock()
        self._pending_key: tuple[bool, str | None] | None = None
        self._deadline: float | None = None
        self._timer: threading.Timer | None = None
        self._fired = False
        self._generation = 0

    @property
    def redirect_pending(self) -> bool:
        return self._deadline is not None

    def evaluate(self, session: AuthSession) -> GuardDecision:
        key = (session.loading, session.user_id)
        with self._lock:
            if key != self._pending_key:
                self._cancel_locked()
            if session.loading:
                return GuardDecision.loading()
            if session.is_authenticated:
                return self._gate(session)
            if self._deadline is None:
                self._start_locked(key)
            expired = self._fired or self._clock() >= self._deadline

        if expired:
            return self._redirect(session, self.login_route)
        return GuardDecision.loading()

    def cancel(self) -> None:
        """Drop any pending redirect, e.g. when the page unmounts."""
        with self._lock:
            self._cancel_locked()

    def _gate(self, session: AuthSession) -> GuardDecision:
        if not self.require_terms:
            return GuardDecision.render()
        # An unreadable profile cannot prove acceptance.
        if not session.profile_resolved:
            return GuardDecision.terms_required()
        profile = session.profile
        if profile is not None and profile.tos_accepted_at is None:
            return GuardDecision.terms_required()
        return GuardDecision.render()

    def _start_locked(self, key: tuple[bool, str | None]) -> None:
        self._generation += 1
        self._pending_key = key
        self._deadline = self._clock() + self.grace_seconds
        if self._on_redirect is not None:
            self._timer = threading.Timer(self.grace_seconds, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._pending_key = None
        self._deadline = None
        self._fired = False

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._deadline is None or self._fired:
                return
            self._fired = True
            callback = self._on_redirect
        if callback is not None:
            callback(self.login_route)
