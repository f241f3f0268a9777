"""Logging Setup and Redaction.

Filters that keep banking data (IBANs, encrypted envelopes) out of
application logs.
"""
import logging
import re

# IBAN: country code, check digits, 11-30 alphanumerics (optionally grouped by spaces).
# Envelopes: long base64 runs; the shortest real envelope encodes to 40+ chars.
SECRET_PATTERNS = [
    (re.compile(r'\b[A-Z]{2}\d{2}(?: ?[A-Z0-9]){11,30}\b'), '[REDACTED_IBAN]'),
    (re.compile(r'[A-Za-z0-9+/]{40,}={0,2}'), '[REDACTED_ENVELOPE]'),
    (re.compile(r'(SECRET_ENCRYPTION_KEY=)\S+'), r'\1[REDACTED]'),
]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def redact(text: str) -> str:
    for pattern, replacement in SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class SecretRedactionFilter(logging.Filter):
    """Filter that redacts secret-like patterns from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(
                redact(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )

        return True


def setup_logging_redaction() -> None:
    """Apply the SecretRedactionFilter to the root logger and its handlers."""
    redact_filter = SecretRedactionFilter()
    root_logger = logging.getLogger()

    for f in root_logger.filters[:]:
        if isinstance(f, SecretRedactionFilter):
            root_logger.removeFilter(f)
    root_logger.addFilter(redact_filter)

    # Records from child loggers skip the root logger's filters but do reach its handlers.
    for handler in root_logger.handlers:
        for f in handler.filters[:]:
            if isinstance(f, SecretRedactionFilter):
                handler.removeFilter(f)
        handler.addFilter(redact_filter)

    logging.info("Logging redaction filters active.")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
    setup_logging_redaction()
