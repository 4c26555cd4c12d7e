"""Verification service interface, data models and error types.

This module provides the core types shared by every VerificationService:
- ServiceCredentials: how calls authenticate
- VerificationRequest: what to check
- VerificationOutcome / PhoneFormatResult: what the service reported
- Error types for transport and decoding failures
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from formcheck.config.models.verification import VerificationConfig
from formcheck.fields.enums import EmailValidationLevel, VerificationKind

API_KEY_USERNAME_PREFIX = "apikey-"


class ServiceCredentials(BaseModel):
    """Username/password pair sent with every call.

    API-key authentication is expressed as a derived username with an
    empty password; only one of the two modes is ever active.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(default="", description="Service username")
    password: SecretStr = Field(default=SecretStr(""), description="Service password")

    @property
    def uses_api_key(self) -> bool:
        return self.username.startswith(API_KEY_USERNAME_PREFIX)

    @classmethod
    def from_config(cls, config: VerificationConfig) -> "ServiceCredentials":
        """Derive credentials from configuration.

        Missing credentials are not an error here; the service rejects the
        call and the failure is handled as an unavailable service.
        """
        api_key = config.api_key.get_secret_value() if config.api_key else ""
        if api_key:
            return cls(username=API_KEY_USERNAME_PREFIX + api_key, password=SecretStr(""))

        return cls(
            username=config.username or "",
            password=config.password or SecretStr(""),
        )


class ServiceStatus(BaseModel):
    """Call status block returned with every response."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    success: bool = Field(..., alias="Success")
    error_message: str | None = Field(default=None, alias="ErrorMessage")
    credits_remaining: Decimal | None = Field(default=None, alias="CreditsRemaining")


class PhoneResultDetails(BaseModel):
    """Descriptive data the service returns about a telephone number."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    telephone_number: str | None = Field(default=None, alias="TelephoneNumber")
    validation_result: str | None = Field(default=None, alias="ValidationResult")
    validation_level: str | None = Field(default=None, alias="ValidationLevel")
    number_type: str | None = Field(default=None, alias="NumberType")
    location: str | None = Field(default=None, alias="Location")
    provider: str | None = Field(default=None, alias="Provider")
    country_code: str | None = Field(default=None, alias="CountryCode")
    country_name: str | None = Field(default=None, alias="CountryName")


class PhoneFormatResult(BaseModel):
    """Outcome of a telephone formatting call."""

    model_config = ConfigDict(frozen=True)

    formatted_number: str | None = Field(default=None, description="Formatted number")
    status: ServiceStatus = Field(..., description="Call status")


class VerificationRequest(BaseModel):
    """A single email or telephone verification request."""

    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., description="Email address or telephone number")
    kind: VerificationKind = Field(..., description="What to verify")
    country: str | None = Field(default=None, description="Default country (phone only)")
    strictness_flags: dict[str, bool] = Field(
        default_factory=dict,
        description="Named options passed through to the service",
    )
    level: EmailValidationLevel | None = Field(
        default=None,
        description="Checking depth (email only)",
    )


class VerificationOutcome(BaseModel):
    """What the service reported for a VerificationRequest."""

    model_config = ConfigDict(frozen=True)

    service_call_succeeded: bool = Field(..., description="Service processed the request")
    result_code: str | None = Field(default=None, description="Raw result code")
    error_message: str | None = Field(default=None, description="Service error message")
    credits_remaining: Decimal | None = Field(default=None, description="Remaining credits")
    details: PhoneResultDetails | None = Field(
        default=None,
        description="Telephone number details (phone only)",
    )


# ============================================================================
# Error Types
# ============================================================================


class VerificationServiceError(Exception):
    """Base exception for verification service failures."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class VerificationTransportError(VerificationServiceError):
    """Service unreachable, timed out, or answered with an HTTP error."""


class VerificationResponseError(VerificationServiceError):
    """Service answered with a body that could not be decoded."""


# ============================================================================
# Service Interface
# ============================================================================


class VerificationService(ABC):
    """External service that formats and validates contact details.

    Implementations make exactly one round trip per call and raise
    VerificationServiceError subclasses on transport or decoding failure.
    Timeouts are the implementation's concern.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name."""

    @abstractmethod
    def format_phone_number(
        self,
        credentials: ServiceCredentials,
        number: str,
        *,
        default_country: str,
    ) -> PhoneFormatResult:
        """Format a telephone number according to its country's conventions."""

    @abstractmethod
    def validate(
        self,
        credentials: ServiceCredentials,
        request: VerificationRequest,
    ) -> VerificationOutcome:
        """Verify an email address or telephone number."""
