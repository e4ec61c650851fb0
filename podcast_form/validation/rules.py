"""Declarative validation rules for the contribution form.

Each field maps to an ordered tuple of rules. A field reports the message of
the first rule that fails, so required-ness always comes before format checks.
Fields are validated independently; there are no cross-field rules.
"""

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, assert_never

from pydantic import BaseModel, Field

from podcast_form.models.enums import Category
from podcast_form.models.form import EmptyFile, FormValues, RemoteFile, UploadedFile

EMAIL_RE = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*$"
)

# Plain decimal notation only: no digit separators, hex or "inf"/"nan"
DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

THUMBNAIL_MIME_TYPES = frozenset({"image/jpeg", "image/png", "image/gif"})
THUMBNAIL_MAX_BYTES = 5_000_000


@dataclass(frozen=True)
class Rule:
    """A single named check with the message shown when it fails."""

    name: str
    message: str
    check: Callable[[Any], bool]


class ValidationState(BaseModel):
    """Validation snapshot derived from the current form values."""

    errors: dict[str, str] = Field(
        default_factory=dict, description="Field name to error message"
    )
    is_valid: bool = Field(..., description="No field reports an error")
    is_dirty: bool = Field(..., description="Values differ from the initial record")


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, EmptyFile):
        return False
    return True


def _parse_number(value: Any) -> float | None:
    """Parse a numeric input, returning None when it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not DECIMAL_RE.match(text):
            return None
        number = float(text)
    else:
        return None
    return number if math.isfinite(number) else None


def _is_number(value: Any) -> bool:
    return _parse_number(value) is not None


def _is_positive(value: Any) -> bool:
    number = _parse_number(value)
    return number is not None and number > 0


def _is_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_RE.match(value.strip()) is not None


def _is_category(value: Any) -> bool:
    try:
        Category(value)
    except ValueError:
        return False
    return True


def _has_image_type(value: Any) -> bool:
    """Thumbnail format check. Empty and remote references always pass."""
    if isinstance(value, (EmptyFile, RemoteFile)):
        return True
    if isinstance(value, UploadedFile):
        return value.content_type in THUMBNAIL_MIME_TYPES
    assert_never(value)


def _within_size_limit(value: Any) -> bool:
    """Thumbnail size check. Empty and remote references always pass."""
    if isinstance(value, (EmptyFile, RemoteFile)):
        return True
    if isinstance(value, UploadedFile):
        return value.size <= THUMBNAIL_MAX_BYTES
    assert_never(value)


def required(label: str) -> Rule:
    """Build a required-ness rule with the conventional message."""
    return Rule("required", f"{label} is required", _is_present)


FIELD_RULES: dict[str, tuple[Rule, ...]] = {
    "name": (required("Name"),),
    "email": (
        required("Email"),
        Rule("email", "Invalid email address", _is_email),
    ),
    "age": (
        required("Age"),
        Rule("number", "Age must be a number", _is_number),
        Rule("positive", "Age must be a positive number", _is_positive),
    ),
    "location": (required("Location"),),
    "topic": (required("Topic"),),
    "description": (required("Description"),),
    "audiofile": (required("Audio file"),),
    "thumbnail": (
        Rule("fileFormat", "Unsupported file format", _has_image_type),
        Rule("fileSize", "File too large", _within_size_limit),
    ),
    "category": (
        required("Category"),
        Rule("oneOf", "Invalid category", _is_category),
    ),
}

INITIAL_VALUES = FormValues()


def validate_field(values: FormValues, field: str) -> str | None:
    """Validate a single field.

    Args:
        values: Current form values.
        field: Name of the field to check.

    Returns:
        The message of the first failing rule, or None if the field is valid.

    Raises:
        KeyError: If the field has no rules registered.
    """
    rules = FIELD_RULES[field]
    value = getattr(values, field)
    for rule in rules:
        if not rule.check(value):
            return rule.message
    return None


def validate_form(values: FormValues) -> dict[str, str]:
    """Validate every field.

    Returns:
        Mapping of field name to error message for invalid fields only.
    """
    errors: dict[str, str] = {}
    for field in FIELD_RULES:
        message = validate_field(values, field)
        if message is not None:
            errors[field] = message
    return errors


def is_dirty(values: FormValues, initial: FormValues | None = None) -> bool:
    """Return True when any field differs from the initial record."""
    return values != (initial if initial is not None else INITIAL_VALUES)


def validation_state(
    values: FormValues, initial: FormValues | None = None
) -> ValidationState:
    """Compute the full validation state for the given values."""
    errors = validate_form(values)
    return ValidationState(
        errors=errors,
        is_valid=not errors,
        is_dirty=is_dirty(values, initial),
    )
