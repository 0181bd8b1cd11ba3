"""Exception hierarchy for identifier validation.

Every validation failure is an ``InvalidIdentifierError``.  The three
subclasses map one-to-one onto the validation phases, in the order they
are checked:

FormatError    — not a string, or not one of the accepted shapes
DateError      — embedded birth date does not exist or lies in the future
ChecksumError  — check digit does not match the recomputed one

``reason`` is a short machine-readable token suitable for logs and
``ValidationResult.reason``.  Messages never echo the raw identifier.
"""
from __future__ import annotations


class InvalidIdentifierError(ValueError):
    """Base class for all identifier validation failures."""

    reason = "invalid"

    def __init__(self, message: str, *, reason: str | None = None) -> None:
        if reason is not None:
            self.reason = reason
        super().__init__(message)


class FormatError(InvalidIdentifierError):
    """Input is not a string or does not match an accepted shape."""

    reason = "format"


class DateError(InvalidIdentifierError):
    """Embedded birth date is not a real calendar date or is in the future."""

    reason = "date"


class ChecksumError(InvalidIdentifierError):
    """Check digit does not match the one computed from the preceding digits."""

    reason = "checksum"

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Check digit mismatch: expected {expected}, got {actual}")


class UnsupportedCountryError(ValueError):
    """No identifier scheme is registered for the requested country code."""

    def __init__(self, country: object) -> None:
        self.country = country
        super().__init__(f"Unsupported country code: {country!r}")
