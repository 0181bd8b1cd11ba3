"""Scheme registry: maps a country code to its identifier scheme.

Usage
-----
    from swedish_ssn.schemes.registry import NationalIdentifier, get_scheme

    scheme = get_scheme("SE")
    scheme.is_valid("900211-1236")

    ssn = NationalIdentifier("SE")
    ssn.mask("900211-1236")

Rules
-----
- The mapping is fixed at import time and read-only.
- Unknown codes raise ``UnsupportedCountryError``.
- Codes are case-insensitive (``"se"`` resolves to ``CountryCode.SE``).
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from swedish_ssn.core.errors import UnsupportedCountryError
from swedish_ssn.core.settings import get_settings
from swedish_ssn.schemes.base import CountryCode, IdentifierScheme
from swedish_ssn.schemes.sweden import SwedishIdentifierScheme

_SCHEMES: Mapping[CountryCode, type] = MappingProxyType(
    {
        CountryCode.SE: SwedishIdentifierScheme,
    }
)


def _resolve(country: str | CountryCode) -> CountryCode:
    if not isinstance(country, str):
        raise UnsupportedCountryError(country)
    try:
        return CountryCode(country.strip().upper())
    except ValueError:
        raise UnsupportedCountryError(country) from None


def supported_countries() -> list[CountryCode]:
    return sorted(_SCHEMES)


def get_scheme(country: str | CountryCode | None = None, **kwargs: Any) -> IdentifierScheme:
    """Return a new scheme instance for *country*.

    *country* defaults to ``Settings.default_country``.  Keyword arguments
    are passed to the scheme's ``from_settings`` constructor (``today``,
    ``diagnostic``, ...).
    """
    code = _resolve(country if country is not None else get_settings().default_country)
    return _SCHEMES[code].from_settings(**kwargs)


class NationalIdentifier:
    """Country-bound facade: ``NationalIdentifier("SE").is_valid(...)``."""

    def __init__(self, country: str | CountryCode | None = None, **kwargs: Any) -> None:
        self._scheme = get_scheme(country, **kwargs)

    @property
    def country(self) -> CountryCode:
        return self._scheme.country

    def is_valid(self, identifier: object) -> bool:
        return self._scheme.is_valid(identifier)

    def mask(self, identifier: object) -> str:
        return self._scheme.mask(identifier)
