"""Personnummer normalizer.

Converts ``YYMMDD-NNNN``, ``YYMMDD+NNNN``, ``YYYYMMDD-NNNN`` and the
separator-less variants into the canonical 12-digit form
``CCYYMMDDNNNC``.

Century inference
-----------------
Only the short (6-digit date) form needs a century.  The separator is the
hint: ``-`` (or no separator) means the subject is younger than 100, ``+``
means 100 or older.  The full year is the latest year not after the
reference year whose last two digits match::

    base = today.year - 100 if separator == "+" else today.year
    year = base - ((base - yy) % 100)

With ``today`` in 2026, ``900211-`` resolves to 1990 and ``430416+`` to
1843.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date

from swedish_ssn.core.errors import FormatError

logger = logging.getLogger(__name__)

# ASCII digits only; \d would also accept other Unicode decimal digits.
_SHAPE = re.compile(r"^([0-9]{6}|[0-9]{8})([-+]?)([0-9]{4})$")

CENTENARIAN_SEPARATOR = "+"
AGE_THRESHOLD_YEARS = 100


@dataclass(frozen=True, slots=True)
class SplitIdentifier:
    """Raw identifier broken into its three textual parts."""

    date_part: str   # 6 or 8 digits
    separator: str   # "-", "+" or ""
    serial_part: str  # 3-digit serial followed by the check digit

    @property
    def is_short(self) -> bool:
        return len(self.date_part) == 6


def split_personnummer(raw: object) -> SplitIdentifier:
    """Split *raw* into date, separator and serial parts.

    Surrounding whitespace is ignored.  Raises ``FormatError`` for
    non-strings and for anything that is not 6 or 8 digits, an optional
    ``-``/``+``, then 4 digits.
    """
    if not isinstance(raw, str):
        raise FormatError(f"Identifier must be a string, not {type(raw).__name__}")

    match = _SHAPE.match(raw.strip())
    if match is None:
        logger.debug("normalizer: shape mismatch (length=%d)", len(raw))
        raise FormatError("Identifier must be YYMMDD-NNNN or YYYYMMDD-NNNN")

    return SplitIdentifier(*match.groups())


def infer_year(two_digit_year: int, separator: str, today: date) -> int:
    """Return the four-digit birth year for a short-form identifier."""
    base = today.year
    if separator == CENTENARIAN_SEPARATOR:
        base -= AGE_THRESHOLD_YEARS
    return base - ((base - two_digit_year) % 100)


def normalize_personnummer(raw: object, *, today: date | None = None) -> str:
    """Return *raw* as 12 digits ``CCYYMMDDNNNC``.

    Long-form input keeps its own century.  Short-form input gets the
    century from :func:`infer_year`, relative to *today* (defaults to the
    current local date).
    """
    return normalize_parts(split_personnummer(raw), today=today)


def normalize_parts(parts: SplitIdentifier, *, today: date | None = None) -> str:
    """Return the 12-digit form for an already split identifier."""
    if not parts.is_short:
        return parts.date_part + parts.serial_part

    reference = today or date.today()
    year = infer_year(int(parts.date_part[:2]), parts.separator, reference)
    return f"{year:04d}{parts.date_part[2:]}{parts.serial_part}"
