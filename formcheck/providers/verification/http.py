"""JSON web service client for email and telephone verification.

Usage:
    from formcheck.providers.verification import HttpVerificationService

    with HttpVerificationService.from_config(settings.verification) as service:
        outcome = service.validate(credentials, request)
"""

from typing import Any

import httpx
from pydantic import ValidationError

from formcheck.config.models.verification import VerificationConfig
from formcheck.fields.enums import EmailValidationLevel, VerificationKind
from formcheck.observability.logging import get_logger
from formcheck.providers.verification.base import (
    PhoneFormatResult,
    PhoneResultDetails,
    ServiceCredentials,
    ServiceStatus,
    VerificationOutcome,
    VerificationRequest,
    VerificationResponseError,
    VerificationService,
    VerificationTransportError,
)

logger = get_logger(__name__)

PHONE_VALIDATION_PATH = "/PhoneValidation/IsValid.json"
EMAIL_VALIDATION_PATH = "/EmailValidation/IsValid.json"
PHONE_FORMATTING_PATH = "/TelephoneFormatting/FormatTelephoneNumber.json"


class HttpVerificationService(VerificationService):
    """Synchronous client for the verification JSON endpoints.

    Attributes:
        base_url: Base URL of the web service
        application_name: Tag sent as the ApplicationName option
    """

    def __init__(
        self,
        base_url: str = "https://webservices.data-8.co.uk",
        application_name: str = "formcheck",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the web service
            application_name: Tag sent as the ApplicationName option
            timeout: Request timeout in seconds
            client: Pre-built httpx client (e.g. with a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self.application_name = application_name
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    @classmethod
    def from_config(
        cls,
        config: VerificationConfig,
        client: httpx.Client | None = None,
    ) -> "HttpVerificationService":
        return cls(
            base_url=config.base_url,
            application_name=config.application_name,
            timeout=config.timeout,
            client=client,
        )

    @property
    def provider_name(self) -> str:
        return "http"

    def __enter__(self) -> "HttpVerificationService":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON payload and return the decoded response body."""
        try:
            response = self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            raise VerificationTransportError(f"Request to {path} failed: {e}") from e

        if response.status_code >= 400:
            raise VerificationTransportError(
                f"Request to {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise VerificationResponseError(
                f"Response from {path} is not valid JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise VerificationResponseError(
                f"Response from {path} is not a JSON object",
                status_code=response.status_code,
            )
        return data

    def _base_payload(self, credentials: ServiceCredentials) -> dict[str, Any]:
        return {
            "username": credentials.username,
            "password": credentials.password.get_secret_value(),
        }

    def _status(self, data: dict[str, Any], path: str) -> ServiceStatus:
        try:
            return ServiceStatus.model_validate(data.get("Status") or {})
        except ValidationError as e:
            raise VerificationResponseError(f"Response from {path} has no usable Status") from e

    def format_phone_number(
        self,
        credentials: ServiceCredentials,
        number: str,
        *,
        default_country: str,
    ) -> PhoneFormatResult:
        payload = self._base_payload(credentials) | {
            "telephoneNumber": number,
            "options": {
                "DefaultCountryCode": default_country,
                "ApplicationName": self.application_name,
            },
        }
        data = self._post(PHONE_FORMATTING_PATH, payload)
        status = self._status(data, PHONE_FORMATTING_PATH)

        logger.debug(
            "phone_format_response",
            success=status.success,
            credits_remaining=status.credits_remaining,
        )
        return PhoneFormatResult(formatted_number=data.get("FormattedNumber"), status=status)

    def validate(
        self,
        credentials: ServiceCredentials,
        request: VerificationRequest,
    ) -> VerificationOutcome:
        if request.kind == VerificationKind.EMAIL:
            return self._validate_email(credentials, request)
        return self._validate_phone(credentials, request)

    def _options(self, request: VerificationRequest) -> dict[str, str]:
        options = {name: str(flag) for name, flag in request.strictness_flags.items()}
        options["ApplicationName"] = self.application_name
        return options

    def _validate_email(
        self,
        credentials: ServiceCredentials,
        request: VerificationRequest,
    ) -> VerificationOutcome:
        level = request.level or EmailValidationLevel.MX
        payload = self._base_payload(credentials) | {
            "email": request.subject,
            "level": level.value,
            "options": self._options(request),
        }
        data = self._post(EMAIL_VALIDATION_PATH, payload)
        status = self._status(data, EMAIL_VALIDATION_PATH)

        result = data.get("Result")
        return VerificationOutcome(
            service_call_succeeded=status.success,
            result_code=result if isinstance(result, str) else None,
            error_message=status.error_message,
            credits_remaining=status.credits_remaining,
        )

    def _validate_phone(
        self,
        credentials: ServiceCredentials,
        request: VerificationRequest,
    ) -> VerificationOutcome:
        payload = self._base_payload(credentials) | {
            "telephoneNumber": request.subject,
            "defaultCountry": request.country,
            "options": self._options(request),
        }
        data = self._post(PHONE_VALIDATION_PATH, payload)
        status = self._status(data, PHONE_VALIDATION_PATH)

        details = None
        result = data.get("Result")
        if isinstance(result, dict):
            try:
                details = PhoneResultDetails.model_validate(result)
            except ValidationError as e:
                raise VerificationResponseError(
                    f"Response from {PHONE_VALIDATION_PATH} has a malformed Result"
                ) from e

        return VerificationOutcome(
            service_call_succeeded=status.success,
            result_code=details.validation_result if details else None,
            error_message=status.error_message,
            credits_remaining=status.credits_remaining,
            details=details,
        )
