"""Tests for swedish_ssn/schemes/ — country enum, protocol, registry, facade."""
from __future__ import annotations

from datetime import date

import pytest

import swedish_ssn
from swedish_ssn.core.errors import UnsupportedCountryError
from swedish_ssn.schemes.base import CountryCode, IdentifierScheme
from swedish_ssn.schemes.registry import NationalIdentifier, get_scheme, supported_countries
from swedish_ssn.schemes.sweden import SwedishIdentifierScheme
from swedish_ssn.validation.validator import ValidationRules

TODAY = date(2026, 10, 17)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestGetScheme:
    def test_sweden(self) -> None:
        scheme = get_scheme("SE")
        assert isinstance(scheme, SwedishIdentifierScheme)
        assert scheme.country is CountryCode.SE

    def test_case_insensitive(self) -> None:
        assert isinstance(get_scheme("se"), SwedishIdentifierScheme)

    def test_enum_member(self) -> None:
        assert isinstance(get_scheme(CountryCode.SE), SwedishIdentifierScheme)

    def test_default_country(self) -> None:
        assert get_scheme().country is CountryCode.SE

    def test_satisfies_protocol(self) -> None:
        assert isinstance(get_scheme("SE"), IdentifierScheme)

    @pytest.mark.parametrize("country", ["NO", "", "SWE", 46])
    def test_unsupported(self, country) -> None:
        with pytest.raises(UnsupportedCountryError):
            get_scheme(country)

    def test_unsupported_default_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SSN_DEFAULT_COUNTRY", "DK")
        with pytest.raises(UnsupportedCountryError):
            get_scheme()

    def test_new_instance_per_call(self) -> None:
        assert get_scheme("SE") is not get_scheme("SE")

    def test_supported_countries(self) -> None:
        assert supported_countries() == [CountryCode.SE]


# ---------------------------------------------------------------------------
# SwedishIdentifierScheme
# ---------------------------------------------------------------------------


class TestSwedishScheme:
    def test_operations(self) -> None:
        scheme = SwedishIdentifierScheme(today=TODAY)
        assert scheme.is_valid("900211-1236") is True
        assert scheme.mask("900211-1236") == "XXXX11-XX3X"
        assert scheme.mask("900211-1236", compact=True) == "XXXX11XX3X"
        assert scheme.parse("900211-1236").normalized == "199002111236"
        assert scheme.validate("900211-1234").reason == "checksum"

    def test_rules_are_bound(self) -> None:
        scheme = SwedishIdentifierScheme(rules=ValidationRules(county_check=False), today=TODAY)
        assert scheme.is_valid("670919-9530") is True

    def test_mask_char_is_bound(self) -> None:
        scheme = SwedishIdentifierScheme(mask_char="*", today=TODAY)
        assert scheme.mask("900211-1236") == "****11-**3*"

    def test_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SSN_COUNTY_CHECK", "false")
        monkeypatch.setenv("SSN_MASK_CHAR", "*")
        scheme = SwedishIdentifierScheme.from_settings(today=TODAY)
        assert scheme.rules.county_check is False
        assert scheme.mask("670919-9530") == "****19-**3*"

    def test_diagnostic_is_bound(self) -> None:
        events: list = []
        scheme = SwedishIdentifierScheme(today=TODAY, diagnostic=lambda e, f: events.append(e))
        scheme.is_valid("900211-1236")
        scheme.is_valid("900211-1234")
        assert events == ["accepted", "rejected"]


# ---------------------------------------------------------------------------
# NationalIdentifier facade
# ---------------------------------------------------------------------------


# Same table the original package was released with.
FACADE_CASES = [
    ("SE", "900211-1234", False),
    ("SE", "670919-9530", False),   # county check
    ("SE", "670919-9534", False),   # checksum
    ("SE", "67019-9530", False),    # date string
    ("SE", "000919-9530", False),
    ("SE", "19900211-1234", False),  # 12 digit
    ("SE", "20470705-0573", False),  # 12 digit, future
    ("SE", "430416+1476", True),    # older than 100
    ("SE", "", False),              # type check
    ("SE", 12341231, False),        # type check
]


@pytest.mark.parametrize("country, identifier, expected", FACADE_CASES)
def test_national_identifier_is_valid(country: str, identifier, expected: bool) -> None:
    assert NationalIdentifier(country, today=TODAY).is_valid(identifier) is expected


def test_national_identifier_mask() -> None:
    ssn = NationalIdentifier("SE", today=TODAY)
    assert ssn.country is CountryCode.SE
    assert ssn.mask("430416+1476") == "XXXX16+XX7X"


def test_national_identifier_unsupported() -> None:
    with pytest.raises(UnsupportedCountryError):
        NationalIdentifier("US")


# ---------------------------------------------------------------------------
# Package surface
# ---------------------------------------------------------------------------


def test_top_level_exports() -> None:
    assert swedish_ssn.is_valid("900211-1236", today=TODAY) is True
    assert swedish_ssn.mask("900211-1236", today=TODAY) == "XXXX11-XX3X"
    assert swedish_ssn.calculate_checksum("900211123") == 6
    for name in swedish_ssn.__all__:
        assert hasattr(swedish_ssn, name)
