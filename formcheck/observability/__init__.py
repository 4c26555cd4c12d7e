"""Observability: structured logging with PII redaction."""

from formcheck.observability.logging import PIIRedactor, get_logger, setup_logging

__all__ = ["PIIRedactor", "get_logger", "setup_logging"]
