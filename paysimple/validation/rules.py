"""
Field predicates and rule containers.

Each predicate takes the raw field value and returns True when it is
acceptable. Predicates never raise: a value of the wrong type simply fails.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable

# Bank account: 4-100 digits, or asterisks followed by the last four digits
ACCOUNT_NUMBER = re.compile(r"^[0-9]{4,100}$")
MASKED_ACCOUNT_NUMBER = re.compile(r"^\*{1,96}[0-9]{4}$")

ROUTING_NUMBER = re.compile(r"^[0-9]{9}$")

# Visa, MasterCard, Amex, Discover by prefix and length
CREDIT_CARD_NUMBER = re.compile(
    r"^(?:4[0-9]{12}(?:[0-9]{3})?"
    r"|5[1-5][0-9]{14}"
    r"|3[47][0-9]{13}"
    r"|6(?:011|5[0-9]{2})[0-9]{12})$"
)
MASKED_CREDIT_CARD_NUMBER = re.compile(r"^\*{11,12}[0-9]{4}$")

EXPIRATION_DATE = re.compile(r"^(0[1-9]|1[0-2])/20[0-9]{2}$")

CVV = re.compile(r"^[0-9]{3,4}$")

# US 11111 / 11111-1111, Canada A1A1A1 / A1A 1A1
US_CA_POSTAL_CODE = re.compile(r"^(?:[0-9]{5}(?:-[0-9]{4})?|[A-Za-z][0-9][A-Za-z] ?[0-9][A-Za-z][0-9])$")
MAX_POSTAL_CODE_LENGTH = 10

EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

Check = Callable[[Any], bool]


@dataclass(frozen=True)
class FieldRule:
    """One check against one attribute of a payload."""

    field: str
    check: Check
    message: str

    def passes(self, payload: Any) -> bool:
        try:
            return bool(self.check(getattr(payload, self.field, None)))
        except (TypeError, ValueError):
            return False


RuleSet = tuple[FieldRule, ...]


def matches(pattern: re.Pattern, *alternatives: re.Pattern) -> Check:
    """Value is a string matching ``pattern`` or any of ``alternatives``."""
    patterns = (pattern, *alternatives)

    def check(value: Any) -> bool:
        return isinstance(value, str) and any(p.fullmatch(value) for p in patterns)

    return check


def not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def max_length(limit: int) -> Check:
    """None and short strings pass; required-ness is a separate rule."""

    def check(value: Any) -> bool:
        return value is None or len(value) <= limit

    return check


def positive(value: Any) -> bool:
    return value is not None and value > 0


def optional(check: Check) -> Check:
    """Apply ``check`` only when a value is present."""

    def wrapped(value: Any) -> bool:
        return value is None or value == "" or check(value)

    return wrapped


def nested(attribute: str, check: Check) -> Check:
    """Apply ``check`` to ``value.<attribute>``; a missing parent passes."""

    def wrapped(value: Any) -> bool:
        return value is None or check(getattr(value, attribute, None))

    return wrapped
