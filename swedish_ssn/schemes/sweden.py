from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from swedish_ssn.core.settings import Settings, get_settings
from swedish_ssn.masking.masker import mask
from swedish_ssn.schemes.base import CountryCode
from swedish_ssn.validation.validator import (
    Diagnostic,
    Identity,
    ValidationResult,
    ValidationRules,
    is_valid,
    parse,
    validate,
)


@dataclass(slots=True)
class SwedishIdentifierScheme:
    """Personnummer scheme bound to one set of rules and an optional clock.

    ``today`` pins the reference date (tests, batch reruns); ``None`` uses
    the current date on every call.
    """

    rules: ValidationRules = field(default_factory=ValidationRules.from_settings)
    mask_char: str = field(default_factory=lambda: get_settings().mask_char)
    today: date | None = None
    diagnostic: Diagnostic | None = None
    country: CountryCode = field(default=CountryCode.SE, init=False)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs) -> SwedishIdentifierScheme:
        settings = settings or get_settings()
        return cls(
            rules=ValidationRules.from_settings(settings),
            mask_char=settings.mask_char,
            **kwargs,
        )

    def is_valid(self, identifier: object) -> bool:
        return is_valid(identifier, today=self.today, rules=self.rules, diagnostic=self.diagnostic)

    def validate(self, identifier: object) -> ValidationResult:
        return validate(identifier, today=self.today, rules=self.rules, diagnostic=self.diagnostic)

    def parse(self, identifier: object) -> Identity:
        return parse(identifier, today=self.today, rules=self.rules, diagnostic=self.diagnostic)

    def mask(self, identifier: object, *, compact: bool = False) -> str:
        return mask(
            identifier,
            compact=compact,
            mask_char=self.mask_char,
            today=self.today,
            rules=self.rules,
            diagnostic=self.diagnostic,
        )
