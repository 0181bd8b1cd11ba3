"""Personnummer masker.

Replaces every digit of a valid identifier with a placeholder except:

- the two day-of-month digits
- the gender digit (second-to-last digit; odd = male, even = female)

The separator stays where it was, so the output has the same length as
the input::

    900211-1236    ->  XXXX11-XX3X
    19900211-1236  ->  XXXXXX11-XX3X

``compact=True`` drops the separator (``XXXX11XX3X``).

The mask is a display transform.  Day of month and gender survive it, so
it is not an anonymisation guarantee.
"""
from __future__ import annotations

import logging
from datetime import date

from swedish_ssn.core.settings import get_settings
from swedish_ssn.validation.validator import Diagnostic, ValidationRules, parse

logger = logging.getLogger(__name__)


def _visible_positions(digit_count: int) -> frozenset[int]:
    day_start = digit_count - 6  # 4 in the short form, 6 in the long form
    return frozenset({day_start, day_start + 1, digit_count - 2})


def mask(
    identifier: object,
    *,
    compact: bool = False,
    mask_char: str | None = None,
    today: date | None = None,
    rules: ValidationRules | None = None,
    diagnostic: Diagnostic | None = None,
) -> str:
    """Return *identifier* with all but the day and gender digits masked.

    Raises ``FormatError``, ``DateError`` or ``ChecksumError`` when
    *identifier* is not valid; nothing is ever partially masked.
    *mask_char* defaults to ``Settings.mask_char`` (``"X"``).
    """
    identity = parse(identifier, today=today, rules=rules, diagnostic=diagnostic)
    placeholder = mask_char or get_settings().mask_char
    if len(placeholder) != 1 or placeholder.isdigit():
        raise ValueError("mask_char must be exactly one non-digit character")

    digit_count = 10 if identity.short_form else 12
    visible = _visible_positions(digit_count)

    rendered: list[str] = []
    digit_index = 0
    # parse() has accepted it, so it is a str
    for char in identifier:  # type: ignore[union-attr]
        if not char.isdigit():
            if not compact:
                rendered.append(char)
            continue
        rendered.append(char if digit_index in visible else placeholder)
        digit_index += 1

    logger.debug("masker: masked identifier (digits=%d, compact=%s)", digit_count, compact)
    return "".join(rendered)
