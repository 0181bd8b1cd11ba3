"""Personnummer validator.

Validation runs three phases in order and stops at the first failure:

1. format    — shape, birth-county code, long-form "+" consistency,
               coordination-number day offset
2. date      — the embedded date exists and is not after *today*
3. checksum  — the last digit equals the Luhn digit of ``YYMMDDNNN``

:func:`parse` raises the phase's ``InvalidIdentifierError`` subclass;
:func:`validate` wraps the outcome in a ``ValidationResult``;
:func:`is_valid` collapses it to a bool and never raises.

Coordination numbers (samordningsnummer) carry the day of month plus 60.
They are accepted by default and the offset is removed before the date
is checked.

Birth-county rule: the first two serial digits must lie in 01–21.
Disable it with ``ValidationRules(county_check=False)`` or
``SSN_COUNTY_CHECK=false``.

Safety rule: raw values are never logged nor passed to diagnostics.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from swedish_ssn.core.errors import ChecksumError, DateError, FormatError, InvalidIdentifierError
from swedish_ssn.core.settings import Settings, get_settings
from swedish_ssn.normalization.personnummer_normalizer import (
    AGE_THRESHOLD_YEARS,
    CENTENARIAN_SEPARATOR,
    SplitIdentifier,
    normalize_parts,
    split_personnummer,
)
from swedish_ssn.validation.checksum import luhn_digit

logger = logging.getLogger(__name__)

COORDINATION_OFFSET = 60
COUNTY_CODE_MIN = 1
COUNTY_CODE_MAX = 21

Diagnostic = Callable[[str, dict[str, object]], None]


def separator_for(birth_year: int, today: date) -> str:
    """Return the short-form separator for someone born in *birth_year*."""
    if today.year - birth_year >= AGE_THRESHOLD_YEARS:
        return CENTENARIAN_SEPARATOR
    return "-"


@dataclass(frozen=True, slots=True)
class ValidationRules:
    allow_coordination: bool = True
    county_check: bool = True

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ValidationRules:
        settings = settings or get_settings()
        return cls(
            allow_coordination=settings.allow_coordination,
            county_check=settings.county_check,
        )


@dataclass(frozen=True, slots=True)
class Identity:
    """A validated personal identity number.

    Attributes
    ----------
    normalized:      12 digits, ``CCYYMMDDNNNC``.
    separator:       Separator as given (``"-"``, ``"+"`` or ``""``).
    birth_date:      Birth date with any coordination offset removed.
    is_coordination: True when the day field carried the +60 offset.
    short_form:      True when the input used a two-digit year.
    """

    normalized: str
    separator: str
    birth_date: date
    is_coordination: bool
    short_form: bool

    @property
    def serial(self) -> str:
        return self.normalized[8:11]

    @property
    def check_digit(self) -> int:
        return int(self.normalized[11])

    @property
    def gender(self) -> str:
        """``"M"`` for an odd gender digit, ``"F"`` for an even one."""
        return "M" if int(self.normalized[10]) % 2 == 1 else "F"

    def format(self, *, long: bool = True, today: date | None = None) -> str:
        """Render as ``YYYYMMDD-NNNN`` or, with ``long=False``, ``YYMMDD-NNNN``.

        The short-form separator is worked out from the birth year against
        *today*: ``+`` once the subject turns 100 in that calendar year,
        ``-`` otherwise.  This is the inverse of the century inference, so
        the short form parses back to the same birth date.
        """
        if long:
            return f"{self.normalized[:8]}-{self.normalized[8:]}"
        separator = separator_for(self.birth_date.year, today or date.today())
        return f"{self.normalized[2:8]}{separator}{self.normalized[8:]}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    ok: bool
    reason: str | None = None
    identity: Identity | None = None

    def __bool__(self) -> bool:
        return self.ok


def _emit(diagnostic: Diagnostic | None, event: str, **fields: object) -> None:
    logger.debug("validator: %s %s", event, fields)
    if diagnostic is None:
        return
    try:
        diagnostic(event, fields)
    except Exception:
        logger.exception("validator: diagnostic callback failed on %s event", event)


def _check_format(raw: object, rules: ValidationRules) -> tuple[SplitIdentifier, bool]:
    parts = split_personnummer(raw)

    if rules.county_check:
        county = int(parts.serial_part[:2])
        if not COUNTY_CODE_MIN <= county <= COUNTY_CODE_MAX:
            raise FormatError(
                f"Birth-county code must be {COUNTY_CODE_MIN:02d}-{COUNTY_CODE_MAX:02d}",
                reason="county",
            )

    day = int(parts.date_part[-2:])
    is_coordination = rules.allow_coordination and day > COORDINATION_OFFSET
    return parts, is_coordination


def _check_separator(parts: SplitIdentifier, normalized: str, today: date) -> None:
    # Long form carries its own century, so a "+" must agree with it
    if parts.is_short or parts.separator != CENTENARIAN_SEPARATOR:
        return
    if separator_for(int(normalized[:4]), today) != CENTENARIAN_SEPARATOR:
        raise FormatError("\"+\" separator on someone younger than 100", reason="separator")


def _check_date(normalized: str, is_coordination: bool, today: date) -> date:
    year, month, day = int(normalized[:4]), int(normalized[4:6]), int(normalized[6:8])
    if is_coordination:
        day -= COORDINATION_OFFSET

    try:
        birth_date = date(year, month, day)
    except ValueError as exc:
        raise DateError("Embedded birth date is not a calendar date") from exc

    if birth_date > today:
        raise DateError("Embedded birth date lies in the future", reason="future")
    return birth_date


def _check_checksum(normalized: str) -> None:
    expected = luhn_digit(normalized[2:11])
    actual = int(normalized[11])
    if expected != actual:
        raise ChecksumError(expected, actual)


def parse(
    identifier: object,
    *,
    today: date | None = None,
    rules: ValidationRules | None = None,
    diagnostic: Diagnostic | None = None,
) -> Identity:
    """Validate *identifier* and return its parsed ``Identity``.

    Raises ``FormatError``, ``DateError`` or ``ChecksumError``.
    """
    reference = today or date.today()
    rules = rules or ValidationRules.from_settings()

    phase = "format"
    try:
        parts, is_coordination = _check_format(identifier, rules)
        normalized = normalize_parts(parts, today=reference)
        _check_separator(parts, normalized, reference)

        phase = "date"
        birth_date = _check_date(normalized, is_coordination, reference)

        phase = "checksum"
        _check_checksum(normalized)
    except InvalidIdentifierError as exc:
        _emit(diagnostic, "rejected", phase=phase, reason=exc.reason)
        raise

    _emit(diagnostic, "accepted", coordination=is_coordination, short_form=parts.is_short)
    return Identity(
        normalized=normalized,
        separator=parts.separator,
        birth_date=birth_date,
        is_coordination=is_coordination,
        short_form=parts.is_short,
    )


def validate(
    identifier: object,
    *,
    today: date | None = None,
    rules: ValidationRules | None = None,
    diagnostic: Diagnostic | None = None,
) -> ValidationResult:
    """Like :func:`parse` but reports failure as a result instead of raising."""
    try:
        identity = parse(identifier, today=today, rules=rules, diagnostic=diagnostic)
    except InvalidIdentifierError as exc:
        return ValidationResult(ok=False, reason=exc.reason)
    return ValidationResult(ok=True, identity=identity)


def is_valid(
    identifier: object,
    *,
    today: date | None = None,
    rules: ValidationRules | None = None,
    diagnostic: Diagnostic | None = None,
) -> bool:
    """Return True if *identifier* is a valid personnummer.  Never raises."""
    return validate(identifier, today=today, rules=rules, diagnostic=diagnostic).ok
