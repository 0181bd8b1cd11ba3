"""Swedish personal identity number (personnummer) validation and masking.

Quick use::

    from swedish_ssn import is_valid, mask

    is_valid("900211-1236")   # True
    mask("900211-1236")       # "XXXX11-XX3X"

``is_valid`` never raises.  ``mask`` and ``parse`` raise a subclass of
:class:`InvalidIdentifierError` when the input is not a valid identifier.
"""
from __future__ import annotations

from swedish_ssn.core.errors import (
    ChecksumError,
    DateError,
    FormatError,
    InvalidIdentifierError,
    UnsupportedCountryError,
)
from swedish_ssn.core.logging import setup_logging
from swedish_ssn.masking.masker import mask
from swedish_ssn.schemes.base import CountryCode, IdentifierScheme
from swedish_ssn.schemes.registry import NationalIdentifier, get_scheme
from swedish_ssn.schemes.sweden import SwedishIdentifierScheme
from swedish_ssn.validation.checksum import calculate_checksum
from swedish_ssn.validation.validator import (
    Identity,
    ValidationResult,
    is_valid,
    parse,
    validate,
)

__all__ = [
    "ChecksumError",
    "CountryCode",
    "DateError",
    "FormatError",
    "IdentifierScheme",
    "Identity",
    "InvalidIdentifierError",
    "NationalIdentifier",
    "SwedishIdentifierScheme",
    "UnsupportedCountryError",
    "ValidationResult",
    "calculate_checksum",
    "get_scheme",
    "is_valid",
    "mask",
    "parse",
    "setup_logging",
    "validate",
]
