"""Payment card checks

Pure functions, no state. A card is usable only when the number, the CVV and
the expiry date all pass.
"""
import re
from datetime import date

MIN_CARD_DIGITS = 13
MAX_CARD_DIGITS = 19
MASK_PLACEHOLDER = "****"

_NON_DIGIT = re.compile(r"[^0-9]")
_CVV = re.compile(r"[0-9]{3,4}")
_EXPIRY = re.compile(r"(0[1-9]|1[0-2])/([0-9]{2})")


def card_digits(raw: str | None) -> str:
    """Strip everything that is not an ASCII digit"""
    if raw is None:
        return ""
    return _NON_DIGIT.sub("", raw)


def luhn_checksum_ok(digits: str) -> bool:
    """Luhn check over a digit string

    Every second digit from the right is doubled; doubled values above 9 lose 9.
    """
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_valid_card_number(raw: str | None) -> bool:
    digits = card_digits(raw)
    if not MIN_CARD_DIGITS <= len(digits) <= MAX_CARD_DIGITS:
        return False
    return luhn_checksum_ok(digits)


def is_valid_cvv(raw: str | None) -> bool:
    if raw is None:
        return False
    return _CVV.fullmatch(raw) is not None


def is_valid_expiry(raw: str | None, as_of: date) -> bool:
    """MM/YY that has not passed yet; the current month still counts"""
    if raw is None:
        return False
    match = _EXPIRY.fullmatch(raw)
    if match is None:
        return False
    month = int(match.group(1))
    year = 2000 + int(match.group(2))
    return (year, month) >= (as_of.year, as_of.month)


def mask_card_number(raw: str | None) -> str:
    """First four and last four digits around ****"""
    digits = card_digits(raw)
    if len(digits) < 8:
        return MASK_PLACEHOLDER
    return f"{digits[:4]}****{digits[-4:]}"
