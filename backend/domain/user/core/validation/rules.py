"""Ordered field rules for User documents.

Rules are evaluated in declaration order (schema order: account, then email;
within a field: presence, length, pattern/shape). The first failing rule wins.
"""

from dataclasses import dataclass
import re
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

from domain.user.core.exceptions.user_errors import UserValidationError

MUTABLE_FIELDS: Tuple[str, ...] = ("account", "email")

ACCOUNT_MIN_LENGTH = 4
ACCOUNT_MAX_LENGTH = 20
# Digit 0 is not accepted.
ACCOUNT_PATTERN = re.compile(r"^[A-Za-z1-9]+$")


@dataclass(frozen=True)
class FieldRule:
    """Single predicate on one field with its user-facing message."""

    field: str
    message: str
    check: Callable[[Any], bool]


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        # Special-use domains other than .test (.local, .localhost, ...) stay rejected.
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


# Length and pattern rules skip absent values: "required" reports those.
USER_RULES: Tuple[FieldRule, ...] = (
    FieldRule("account", "account is required", _present),
    FieldRule(
        "account",
        f"account must be at least {ACCOUNT_MIN_LENGTH} characters",
        lambda v: not isinstance(v, str) or len(v) >= ACCOUNT_MIN_LENGTH,
    ),
    FieldRule(
        "account",
        f"account must be at most {ACCOUNT_MAX_LENGTH} characters",
        lambda v: not isinstance(v, str) or len(v) <= ACCOUNT_MAX_LENGTH,
    ),
    FieldRule(
        "account",
        "account may only contain letters and digits 1-9",
        lambda v: isinstance(v, str) and ACCOUNT_PATTERN.match(v) is not None,
    ),
    FieldRule("email", "email is required", _present),
    FieldRule("email", "email format is invalid", _is_email),
)


def normalize_user_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only mutable fields and coerce them to their stored form.

    Unknown keys are dropped. A string account is trimmed. Numbers and
    booleans are cast to text; other shapes are kept as-is and rejected by
    the rules.

    Args:
        payload: Decoded request body

    Returns:
        Dict with the supplied subset of ``account``/``email``
    """
    fields: Dict[str, Any] = {}
    for name in MUTABLE_FIELDS:
        if name not in payload:
            continue
        value = payload[name]
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (int, float)):
            value = str(value)
        if name == "account" and isinstance(value, str):
            value = value.strip()
        fields[name] = value
    return fields


def first_violation(
    document: Mapping[str, Any], fields: Optional[Iterable[str]] = None
) -> Optional[FieldViolation]:
    """Evaluate rules in order and return the first failure.

    Args:
        document: Field values to check (missing keys count as absent)
        fields: Restrict evaluation to these fields (default: all)

    Returns:
        The first violation, or None if every rule passes
    """
    selected = set(MUTABLE_FIELDS if fields is None else fields)
    for rule in USER_RULES:
        if rule.field not in selected:
            continue
        if not rule.check(document.get(rule.field)):
            return FieldViolation(rule.field, rule.message)
    return None


def validate_user_fields(
    document: Mapping[str, Any], fields: Optional[Iterable[str]] = None
) -> None:
    """Raise ``UserValidationError`` for the first failing rule.

    Raises:
        UserValidationError: If any selected rule fails
    """
    violation = first_violation(document, fields)
    if violation is not None:
        raise UserValidationError(violation.field, violation.message)


def uniqueness_lookup(fields: Mapping[str, Any]) -> Dict[str, str]:
    """Subset of ``fields`` usable for a uniqueness lookup (non-empty text)."""
    return {
        name: value
        for name, value in fields.items()
        if isinstance(value, str) and value != ""
    }
