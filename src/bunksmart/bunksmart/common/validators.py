from __future__ import annotations

import re

from ..core.constants import MAX_TARGET_PERCENTAGE, MIN_TARGET_PERCENTAGE
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_text(value, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not require_text(value, field_name).strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value, field_name: str) -> str:
    if value is None:
        return ""
    return require_text(value, field_name).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if len(require_text(value, field_name)) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: str) -> str:
    email = require_non_empty(value, "Email").lower()
    if not _EMAIL_RE.match(email):
        raise ValidationError("Email is not valid")
    return email


def require_target_percentage(value) -> float:
    """Coerce a target percentage and check it lies in [0, 100]."""
    try:
        target = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Target percentage must be a number")

    if target != target or not MIN_TARGET_PERCENTAGE <= target <= MAX_TARGET_PERCENTAGE:
        raise ValidationError(
            f"Target percentage must be between {MIN_TARGET_PERCENTAGE} and {MAX_TARGET_PERCENTAGE}"
        )
    return target
