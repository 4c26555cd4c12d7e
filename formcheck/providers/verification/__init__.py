"""Email and telephone verification services.

VerificationService is the interface the normalization and validation
code depends on; HttpVerificationService talks to the JSON web service and
MockVerificationService answers from memory for tests.
"""

from formcheck.providers.verification.base import (
    PhoneFormatResult,
    PhoneResultDetails,
    ServiceCredentials,
    ServiceStatus,
    VerificationOutcome,
    VerificationRequest,
    VerificationResponseError,
    VerificationService,
    VerificationServiceError,
    VerificationTransportError,
)
from formcheck.providers.verification.http import HttpVerificationService
from formcheck.providers.verification.mock import MockVerificationService

__all__ = [
    # Data models
    "PhoneFormatResult",
    "PhoneResultDetails",
    "ServiceCredentials",
    "ServiceStatus",
    "VerificationOutcome",
    "VerificationRequest",
    # Errors
    "VerificationServiceError",
    "VerificationTransportError",
    "VerificationResponseError",
    # Services
    "VerificationService",
    "HttpVerificationService",
    # Testing
    "MockVerificationService",
]
