"""Mock verification service for testing."""

from typing import Any

from formcheck.fields.enums import EmailResultCode, PhoneResultCode, VerificationKind
from formcheck.providers.verification.base import (
    PhoneFormatResult,
    PhoneResultDetails,
    ServiceCredentials,
    ServiceStatus,
    VerificationOutcome,
    VerificationRequest,
    VerificationService,
    VerificationServiceError,
)


class MockVerificationService(VerificationService):
    """In-memory verification service.

    Returns configurable results without making network calls and records
    every call for test assertions.
    """

    def __init__(
        self,
        phone_results: dict[str, str] | None = None,
        email_results: dict[str, str] | None = None,
        formatted_numbers: dict[str, str] | None = None,
        default_phone_result: str = PhoneResultCode.VALID.value,
        default_email_result: str = EmailResultCode.VALID.value,
        available: bool = True,
        error: VerificationServiceError | None = None,
    ):
        """Initialize mock service.

        Args:
            phone_results: Result code per telephone number
            email_results: Result code per email address
            formatted_numbers: Formatted output per input number; numbers not
                listed are reported as unformattable
            default_phone_result: Result for numbers not in phone_results
            default_email_result: Result for addresses not in email_results
            available: When False every call reports Status.Success = False
            error: Raised from every call when set
        """
        self._phone_results = phone_results or {}
        self._email_results = email_results or {}
        self._formatted_numbers = formatted_numbers or {}
        self._default_phone_result = default_phone_result
        self._default_email_result = default_email_result
        self.available = available
        self.error = error
        self._call_history: list[dict[str, Any]] = []

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def call_history(self) -> list[dict[str, Any]]:
        """Return history of calls for testing assertions."""
        return self._call_history

    def clear_history(self) -> None:
        self._call_history.clear()

    def _status(self) -> ServiceStatus:
        if self.available:
            return ServiceStatus(success=True, credits_remaining=100)
        return ServiceStatus(success=False, error_message="Service unavailable")

    def format_phone_number(
        self,
        credentials: ServiceCredentials,
        number: str,
        *,
        default_country: str,
    ) -> PhoneFormatResult:
        self._call_history.append({
            "operation": "format_phone_number",
            "username": credentials.username,
            "number": number,
            "default_country": default_country,
        })
        if self.error:
            raise self.error

        formatted = self._formatted_numbers.get(number)
        if not self.available or formatted is None:
            return PhoneFormatResult(
                formatted_number=None,
                status=ServiceStatus(success=False, error_message="Unable to format number"),
            )
        return PhoneFormatResult(formatted_number=formatted, status=self._status())

    def validate(
        self,
        credentials: ServiceCredentials,
        request: VerificationRequest,
    ) -> VerificationOutcome:
        self._call_history.append({
            "operation": "validate",
            "username": credentials.username,
            "request": request,
        })
        if self.error:
            raise self.error

        status = self._status()
        if not status.success:
            return VerificationOutcome(
                service_call_succeeded=False,
                error_message=status.error_message,
            )

        if request.kind == VerificationKind.EMAIL:
            code = self._email_results.get(request.subject, self._default_email_result)
            return VerificationOutcome(
                service_call_succeeded=True,
                result_code=code,
                credits_remaining=status.credits_remaining,
            )

        code = self._phone_results.get(request.subject, self._default_phone_result)
        return VerificationOutcome(
            service_call_succeeded=True,
            result_code=code,
            credits_remaining=status.credits_remaining,
            details=PhoneResultDetails(
                telephone_number=request.subject,
                validation_result=code,
                country_code=request.country,
            ),
        )
