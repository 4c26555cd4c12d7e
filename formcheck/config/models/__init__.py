"""Configuration model exports.

    from formcheck.config.models import VerificationConfig, LoggingConfig
"""

from formcheck.config.models.observability import LoggingConfig, ObservabilityConfig
from formcheck.config.models.verification import VerificationConfig

__all__ = [
    "LoggingConfig",
    "ObservabilityConfig",
    "VerificationConfig",
]
