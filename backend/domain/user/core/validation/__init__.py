"""User field validation rules."""

from .rules import (
    MUTABLE_FIELDS,
    USER_RULES,
    FieldRule,
    FieldViolation,
    first_violation,
    normalize_user_fields,
    uniqueness_lookup,
    validate_user_fields,
)

__all__ = [
    "MUTABLE_FIELDS",
    "USER_RULES",
    "FieldRule",
    "FieldViolation",
    "first_violation",
    "normalize_user_fields",
    "uniqueness_lookup",
    "validate_user_fields",
]
