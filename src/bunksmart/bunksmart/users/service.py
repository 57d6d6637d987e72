from __future__ import annotations

import secrets
from dataclasses import dataclass, replace
from typing import Callable, Optional

import structlog
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_local, to_epoch_ms
from ..common.validators import optional_text, require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH, VERIFICATION_CODE_LENGTH, VERIFICATION_CODE_TTL_SECONDS
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..state.model import UserProfile
from ..state.store import AppStateStore
from .model import PendingSignup
from .repository import AccountRepository

logger = structlog.get_logger()


def random_verification_code() -> str:
    return f"{secrets.randbelow(10 ** VERIFICATION_CODE_LENGTH):0{VERIFICATION_CODE_LENGTH}d}"


def _profile_for(profile: Optional[UserProfile], email: str) -> Optional[UserProfile]:
    # A saved profile only belongs to the account that created it.
    if profile and profile.email == email:
        return profile
    return None


@dataclass(frozen=True)
class SessionUser:
    """Who is logged in after signup or login."""

    email: str
    has_completed_setup: bool


class AuthService:
    """Use case: mocked login / signup with a verification code."""

    def __init__(
        self,
        accounts: AccountRepository,
        store: AppStateStore,
        *,
        code_factory: Callable[[], str] = random_verification_code,
    ):
        self._accounts = accounts
        self._store = store
        self._code_factory = code_factory
        self._pending: dict[str, PendingSignup] = {}

    def request_signup(self, email: str, password: str) -> str:
        """Start a signup and return the verification code.

        Note: There is no mail delivery; the code is only logged.
        """
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._accounts.get_by_email(email):
            raise ValidationError("An account with this email already exists")

        now_ms = to_epoch_ms(now_local())
        self._drop_expired(now_ms)

        code = self._code_factory()
        self._pending[email] = PendingSignup(
            email=email,
            password_hash=generate_password_hash(password),
            code=code,
            issued_at=now_ms,
        )
        logger.info("signup_code_issued", email=email, code=code)
        return code

    def verify_signup(self, email: str, code: str) -> SessionUser:
        email = require_email(email)
        code = optional_text(code, "Verification code")
        self._drop_expired(to_epoch_ms(now_local()))

        pending = self._pending.get(email)
        if not pending or not secrets.compare_digest(pending.code.encode(), code.encode()):
            raise AuthenticationError("Invalid verification code")

        del self._pending[email]
        self._accounts.create_account(
            email=email,
            password_hash=pending.password_hash,
            created_at=to_epoch_ms(now_local()),
        )

        settings = self._store.settings
        profile = _profile_for(settings.profile, email) or UserProfile(email=email)
        self._store.replace_settings(
            replace(
                settings,
                is_logged_in=True,
                profile=profile,
                has_completed_setup=bool(profile.name),
            )
        )

        logger.info("signup_completed", email=email)
        return SessionUser(email=email, has_completed_setup=self._store.settings.has_completed_setup)

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = require_email(email)
        account = self._accounts.get_by_email(email)
        if not account:
            raise AuthenticationError("Wrong email or password")

        try:
            ok = isinstance(password, str) and check_password_hash(account.password_hash, password)
        except ValueError:
            # e.g. corrupted hash values in the accounts file
            ok = False

        if not ok:
            logger.info("login_failed", email=email)
            raise AuthenticationError("Wrong email or password")

        settings = self._store.settings
        profile = _profile_for(settings.profile, email)
        self._store.replace_settings(
            replace(
                settings,
                is_logged_in=True,
                profile=profile or UserProfile(email=email),
                has_completed_setup=bool(profile and profile.name),
            )
        )

        logger.info("login_succeeded", email=email)
        return SessionUser(email=email, has_completed_setup=self._store.settings.has_completed_setup)

    def _drop_expired(self, now_ms: int) -> None:
        cutoff = now_ms - VERIFICATION_CODE_TTL_SECONDS * 1000
        for email in [e for e, p in self._pending.items() if p.issued_at < cutoff]:
            del self._pending[email]

    def logout(self) -> None:
        self._store.replace_settings(replace(self._store.settings, is_logged_in=False))
        logger.info("logout")


class ProfileService:
    """Use case: complete the student profile after first login."""

    def __init__(self, store: AppStateStore):
        self._store = store

    def complete_profile(
        self,
        *,
        name: str,
        usn: str,
        semester: str = "",
        college_name: str = "",
    ) -> UserProfile:
        settings = self._store.settings
        if not settings.is_logged_in:
            raise AuthorizationError("Please log in first")

        email = settings.profile.email if settings.profile else ""
        profile = UserProfile(
            email=email,
            name=require_non_empty(name, "Name"),
            usn=require_non_empty(usn, "USN").upper(),
            semester=optional_text(semester, "Semester"),
            college_name=optional_text(college_name, "College name"),
        )
        self._store.replace_settings(replace(settings, profile=profile, has_completed_setup=True))

        logger.info("profile_completed", email=email)
        return profile

    def get_profile(self) -> Optional[UserProfile]:
        return self._store.settings.profile
