"""Opt-in logging for the ``swedish_ssn`` package.

The package itself never configures logging; its module loggers stay
silent until the application does.  ``setup_logging()`` attaches a
console handler to the ``swedish_ssn`` logger that runs every record
through ``PIISafeFilter`` first.
"""
import logging
import logging.config
import re

REDACTED = "[REDACTED]"

# (pattern, replacement) pairs applied in order
PII_REDACTIONS: list[tuple[re.Pattern[str], str]] = [
    # Personnummer, short or long form, with or without separator
    (re.compile(r"(?<!\d)(?:\d{2})?\d{6}[-+]?\d{4}(?!\d)"), REDACTED),
    (re.compile(r"(?i)(identifier\s*[=:]\s*)([^,\s]+)"), rf"\1{REDACTED}"),
]


class PIISafeFilter(logging.Filter):
    """Redacts identifier-shaped values from the message and its args."""

    @staticmethod
    def redact(value: object) -> object:
        if not isinstance(value, str):
            return value
        for pattern, replacement in PII_REDACTIONS:
            value = pattern.sub(replacement, value)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self.redact(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self.redact(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self.redact(value) for key, value in record.args.items()}

        return True


def setup_logging(level: str | None = None) -> None:
    """Send ``swedish_ssn`` log records to stderr through ``PIISafeFilter``.

    *level* overrides ``Settings.log_level`` (``SSN_LOG_LEVEL``).
    """
    from swedish_ssn.core.settings import get_settings

    level = (level or get_settings().log_level).upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "pii_safe": {"()": PIISafeFilter},
            },
            "formatters": {
                "plain": {"format": "%(levelname)s %(name)s: %(message)s"},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "filters": ["pii_safe"],
                }
            },
            "loggers": {
                "swedish_ssn": {
                    "handlers": ["stderr"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )
