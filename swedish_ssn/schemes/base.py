from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable


class CountryCode(StrEnum):
    SE = "SE"


@runtime_checkable
class IdentifierScheme(Protocol):
    """Validation and masking for one country's national identifier."""

    country: CountryCode

    def is_valid(self, identifier: object) -> bool:
        ...

    def mask(self, identifier: object) -> str:
        ...
