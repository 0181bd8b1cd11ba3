"""Check digit for Swedish personal identity numbers.

The scheme is Luhn (Mod-10) applied from the left over the nine digits
``YYMMDDNNN``; the century is never part of the calculation.
"""
from __future__ import annotations

from swedish_ssn.core.errors import FormatError

CHECKSUM_BASE_LENGTH = 9
_SEPARATOR_OFFSETS = (6, 8)


def luhn_digit(base: str) -> int:
    """Return the check digit for exactly nine ASCII digits.

    Weights alternate 2, 1, 2, ... starting with the leftmost digit.
    Products above 9 have 9 subtracted (the same as summing their digits).
    Raises ``FormatError`` when *base* is not nine digits.
    """
    if len(base) != CHECKSUM_BASE_LENGTH or not (base.isascii() and base.isdigit()):
        raise FormatError("Checksum base must be exactly 9 digits")

    total = 0
    for i, char in enumerate(base):
        digit = int(char)
        if i % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return (10 - total % 10) % 10


def calculate_checksum(digits: str | int) -> int:
    """Return the check digit for an identifier given as digits.

    Accepts the forms callers typically hold:

    ==========  ================================================
    length      interpretation
    ==========  ================================================
    8           9-digit base whose leading zero was lost as int
    9           ``YYMMDDNNN``
    10          ``YYMMDDNNNC``; the trailing check digit is ignored
    11          ``CCYYMMDDNNN``; the century is dropped
    12          ``CCYYMMDDNNNC``; century and check digit dropped
    ==========  ================================================

    One ``-``/``+`` separator is dropped when it sits right after the
    date part (offset 6 or 8).  A minus sign, a separator anywhere else,
    any other non-digit or any other length raises ``FormatError``.
    """
    text = str(digits)
    for offset in _SEPARATOR_OFFSETS:
        if len(text) > offset and text[offset] in "-+":
            text = text[:offset] + text[offset + 1:]
            break
    if not (text.isascii() and text.isdigit()):
        raise FormatError("Checksum input must be digits with at most one separator")

    length = len(text)
    if length == 8:
        base = "0" + text
    elif length == 9:
        base = text
    elif length == 10:
        base = text[:9]
    elif length in (11, 12):
        base = text[2:11]
    else:
        raise FormatError(f"Cannot compute a check digit from {length} digits")
    return luhn_digit(base)

