"""Record-level validation of email and telephone fields."""

from formcheck.fields.enums import VerificationKind
from formcheck.fields.models import (
    CountryContext,
    EmailValidationRule,
    FieldDescriptor,
    FieldValidationError,
    Record,
    TelephoneValidationRule,
)
from formcheck.normalization.country import CountryResolver
from formcheck.observability.logging import get_logger
from formcheck.providers.verification.base import (
    ServiceCredentials,
    VerificationService,
    VerificationServiceError,
)
from formcheck.validation.attempt import ACCEPTED, ValidationAttempt, ValidationOutcome
from formcheck.validation.verdict import VerdictPolicy

logger = get_logger(__name__)


class RecordValidator:
    """Validates every field of a record that declares a validation rule.

    Service failures are inconclusive: they are logged and the field is
    accepted, so an outage never blocks a form submission.
    """

    def __init__(
        self,
        service: VerificationService,
        credentials: ServiceCredentials,
        *,
        default_country: str | None = None,
        process_default_country: str = "",
        country_resolver: CountryResolver | None = None,
        attempt: ValidationAttempt | None = None,
    ) -> None:
        self._default_country = default_country
        self._process_default_country = process_default_country
        self._country_resolver = country_resolver or CountryResolver()
        self._attempt = attempt or ValidationAttempt(service, credentials)

    def validate(self, record: Record) -> list[FieldValidationError]:
        """Validate a record.

        Returns:
            One error per rejected field, in declaration order
        """
        errors: list[FieldValidationError] = []

        for descriptor in record.record_type.descriptors:
            if descriptor.validation is None:
                continue

            outcome = self.validate_field(record, descriptor)
            if not outcome.accept:
                errors.append(
                    FieldValidationError(
                        field_name=descriptor.name,
                        message=outcome.message or "",
                    )
                )

        return errors

    def validate_field(self, record: Record, descriptor: FieldDescriptor) -> ValidationOutcome:
        """Validate a single field of `record` against its declared rule."""
        rule = descriptor.validation
        value = record.get(descriptor.name)
        if rule is None or not isinstance(value, str) or not value:
            return ACCEPTED

        try:
            if isinstance(rule, EmailValidationRule):
                return self._attempt.validate(
                    value,
                    None,
                    {},
                    VerificationKind.EMAIL,
                    display_name=descriptor.label,
                    error_message=rule.error_message,
                    level=rule.level,
                )
            return self._validate_phone(record, descriptor, rule, value)
        except VerificationServiceError as e:
            logger.warning(
                "verification_call_failed",
                field_name=descriptor.name,
                error=e.message,
                status_code=e.status_code,
            )
            return ACCEPTED

    def _validate_phone(
        self,
        record: Record,
        descriptor: FieldDescriptor,
        rule: TelephoneValidationRule,
        value: str,
    ) -> ValidationOutcome:
        country = self._country_resolver.resolve(
            CountryContext.from_record(
                record,
                attribute_default=rule.default_country or self._default_country,
                process_default=self._process_default_country,
                country_field=rule.default_country_field,
            )
        )
        policy = VerdictPolicy(
            treat_no_coverage_as_invalid=rule.treat_no_coverage_as_invalid,
            treat_unavailable_as_invalid=rule.treat_unavailable_mobile_as_invalid,
        )
        return self._attempt.validate(
            value,
            country,
            policy.as_flags(),
            VerificationKind.PHONE,
            display_name=descriptor.label,
            error_message=rule.error_message,
        )
