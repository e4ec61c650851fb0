"""Validation engine for the contribution form."""

from podcast_form.validation.rules import (
    FIELD_RULES,
    INITIAL_VALUES,
    THUMBNAIL_MAX_BYTES,
    THUMBNAIL_MIME_TYPES,
    Rule,
    ValidationState,
    is_dirty,
    validate_field,
    validate_form,
    validation_state,
)

__all__ = [
    "FIELD_RULES",
    "INITIAL_VALUES",
    "THUMBNAIL_MAX_BYTES",
    "THUMBNAIL_MIME_TYPES",
    "Rule",
    "ValidationState",
    "is_dirty",
    "validate_field",
    "validate_form",
    "validation_state",
]
