"""Phone number masking for Brazilian and North-American numbers.

Phones are stored digits-only and formatted for display:

- Brazil: ``(92) 98139-4605`` (11 digits) or ``(92) 3234-5678`` (10 digits)
- US/Canada: ``+1 (555) 123-4567`` (11 digits starting with 1)

Formatting is progressive so partially typed numbers render sensibly.
"""

import re
from typing import Literal

_NON_DIGITS = re.compile(r"[^0-9]")

PhoneCountry = Literal["BR", "US", "unknown"]


def unformat_phone_number(value: str | None) -> str:
    """Strip everything except digits."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def format_phone_number(value: str | None) -> str:
    digits = unformat_phone_number(value)
    if not digits:
        return ""
    if digits.startswith("1"):
        return _format_us(digits)
    return _format_br(digits)


def _format_br(digits: str) -> str:
    if len(digits) <= 2:
        return f"({digits}"
    if len(digits) <= 6:
        return f"({digits[:2]}) {digits[2:]}"
    if len(digits) <= 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:10]}"
    return f"({digits[:2]}) {digits[2:7]}-{digits[7:11]}"


def _format_us(digits: str) -> str:
    if len(digits) <= 1:
        return f"+{digits}"
    if len(digits) <= 4:
        return f"+{digits[0]} ({digits[1:]}"
    if len(digits) <= 7:
        return f"+{digits[0]} ({digits[1:4]}) {digits[4:]}"
    return f"+{digits[0]} ({digits[1:4]}) {digits[4:7]}-{digits[7:11]}"


def is_valid_phone(value: str | None) -> bool:
    """Return True for a complete BR (10/11 digits) or US (1 + 10 digits) number."""
    return detect_phone_country(value) != "unknown"


def detect_phone_country(value: str | None) -> PhoneCountry:
    digits = unformat_phone_number(value)
    if digits.startswith("1"):
        return "US" if len(digits) == 11 else "unknown"
    if len(digits) in (10, 11):
        return "BR"
    return "unknown"


def validate_phone_number(value: str | None) -> str | None:
    """Digits to store for ``value``, or None when no phone was given.

    Raises:
        ValueError: If the digits are not a complete BR or US number.
    """
    digits = unformat_phone_number(value)
    if not digits:
        return None
    if not is_valid_phone(digits):
        raise ValueError(f"Telefone inválido: {value}")
    return digits
