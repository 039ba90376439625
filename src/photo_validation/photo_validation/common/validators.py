from __future__ import annotations

import re

from ..core.exceptions import ValidationError

# Document-store style identifiers: letters, digits, '-' and '_'.
_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_identifier(value: str, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    value = require_non_empty(value, field_name)
    if not _ID_PATTERN.match(value):
        raise ValidationError(f"{field_name} is malformed")
    return value


def require_bool(value, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a boolean")
    return value


def optional_text(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
