"""Single-field verification against the external service."""

from pydantic import BaseModel, ConfigDict

from formcheck.fields.enums import EmailValidationLevel, VerificationKind
from formcheck.observability.logging import get_logger
from formcheck.providers.verification.base import (
    ServiceCredentials,
    VerificationRequest,
    VerificationService,
)
from formcheck.validation.verdict import VerdictInterpreter, VerdictPolicy

logger = get_logger(__name__)

DEFAULT_MESSAGES = {
    VerificationKind.EMAIL: "The {display_name} field is not a valid email address.",
    VerificationKind.PHONE: "The {display_name} field is not a valid telephone number.",
}


class ValidationOutcome(BaseModel):
    """Accept/reject decision for one value."""

    model_config = ConfigDict(frozen=True)

    accept: bool
    message: str | None = None


ACCEPTED = ValidationOutcome(accept=True)


class ValidationAttempt:
    """Verifies one value with one service call.

    Empty values are accepted without calling the service. Errors raised
    by the service propagate to the caller; no retry is attempted.
    """

    def __init__(
        self,
        service: VerificationService,
        credentials: ServiceCredentials,
        interpreter: VerdictInterpreter | None = None,
    ) -> None:
        self._service = service
        self._credentials = credentials
        self._interpreter = interpreter or VerdictInterpreter()

    def validate(
        self,
        subject: str | None,
        resolved_country: str | None,
        strictness_flags: dict[str, bool],
        kind: VerificationKind,
        *,
        display_name: str = "value",
        error_message: str | None = None,
        level: EmailValidationLevel | None = None,
    ) -> ValidationOutcome:
        """Verify `subject` and judge the result.

        Args:
            subject: Email address or telephone number
            resolved_country: Default country for telephone numbers
            strictness_flags: Named options passed through to the service
                and used to judge ambiguous results
            kind: What `subject` is
            display_name: Field name used in the rejection message
            error_message: Rejection message template with {display_name}
            level: Checking depth for email addresses

        Returns:
            ValidationOutcome carrying the formatted message when rejected
        """
        if not subject:
            return ACCEPTED

        request = VerificationRequest(
            subject=subject,
            kind=kind,
            country=resolved_country if kind == VerificationKind.PHONE else None,
            strictness_flags=dict(strictness_flags),
            level=level if kind == VerificationKind.EMAIL else None,
        )
        outcome = self._service.validate(self._credentials, request)

        if not outcome.service_call_succeeded:
            logger.warning(
                "verification_service_unavailable",
                kind=kind.value,
                error=outcome.error_message,
            )

        policy = VerdictPolicy.from_flags(strictness_flags)
        if self._interpreter.interpret(outcome, policy, kind):
            return ACCEPTED

        template = error_message or DEFAULT_MESSAGES[kind]
        logger.info(
            "field_validation_rejected",
            kind=kind.value,
            display_name=display_name,
            result_code=outcome.result_code,
        )
        return ValidationOutcome(
            accept=False,
            message=template.format(display_name=display_name),
        )
