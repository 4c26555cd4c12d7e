"""Metadata-driven normalization of form records.

Walks a record's declared fields and standardizes each writable string
value according to its data-type tag:
- every value is trimmed
- email addresses are lower-cased
- first names and surnames are proper-cased
- telephone numbers are formatted by the verification service
"""

from collections.abc import MutableMapping
from typing import Any

from formcheck.fields.enums import FieldAction
from formcheck.fields.models import (
    CountryContext,
    FieldChange,
    FieldDescriptor,
    Record,
    TelephoneValidationRule,
)
from formcheck.normalization.casing import DEFAULT_LOCALE, to_proper_case
from formcheck.normalization.country import CountryResolver
from formcheck.normalization.rules import FieldRuleTable
from formcheck.observability.logging import get_logger
from formcheck.providers.verification.base import (
    ServiceCredentials,
    VerificationService,
    VerificationServiceError,
)

logger = get_logger(__name__)


class NormalizationDispatcher:
    """Standardizes the formatting of a record's field values.

    Read-only fields and fields whose value is not a string are skipped
    without being inspected. A failed telephone formatting call never stops
    the pass; the field keeps its trimmed value.
    """

    def __init__(
        self,
        service: VerificationService,
        credentials: ServiceCredentials,
        *,
        default_country: str | None = None,
        process_default_country: str = "",
        locale: str = DEFAULT_LOCALE,
        rule_table: FieldRuleTable | None = None,
        country_resolver: CountryResolver | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            service: Service used to format telephone numbers
            credentials: Credentials sent with every service call
            default_country: Default country for this dispatcher's phone fields
            process_default_country: Process-wide default country
            locale: Locale used when proper-casing names
            rule_table: Tag to action mapping
            country_resolver: Default country resolution
        """
        self._service = service
        self._credentials = credentials
        self._default_country = default_country
        self._process_default_country = process_default_country
        self._locale = locale
        self._rule_table = rule_table or FieldRuleTable()
        self._country_resolver = country_resolver or CountryResolver()

    def normalize(self, record: Record) -> list[FieldChange]:
        """Compute the normalized value of every eligible field.

        The record is not modified.

        Returns:
            One FieldChange per field whose normalized value differs
            from its current value, in declaration order
        """
        changes: list[FieldChange] = []

        for descriptor in record.record_type.descriptors:
            if descriptor.read_only:
                continue

            value = record.get(descriptor.name)
            if not isinstance(value, str):
                continue

            formatted = self._normalize_value(record, descriptor, value)
            if formatted != value:
                changes.append(
                    FieldChange(field_name=descriptor.name, old_value=value, new_value=formatted)
                )

        return changes

    def standardize(
        self,
        record: Record,
        form_state: MutableMapping[str, Any] | None = None,
    ) -> list[FieldChange]:
        """Normalize `record` and write every change back into it.

        Args:
            record: Record to update in place
            form_state: Parallel mapping of raw submitted values to keep in step

        Returns:
            The changes applied
        """
        changes = self.normalize(record)
        apply_changes(record, changes, form_state)

        if changes:
            logger.debug(
                "record_standardized",
                record_type=record.record_type.name,
                changed_fields=[c.field_name for c in changes],
            )
        return changes

    def _normalize_value(self, record: Record, descriptor: FieldDescriptor, value: str) -> str:
        trimmed = value.strip()
        action = self._rule_table.rule_for(descriptor.tag)

        if action == FieldAction.LOWERCASE_EMAIL:
            return trimmed.lower()
        if action == FieldAction.PROPER_CASE_FIRST_NAME:
            return to_proper_case(trimmed, False, self._locale)
        if action == FieldAction.PROPER_CASE_LAST_NAME:
            return to_proper_case(trimmed, True, self._locale)
        if action == FieldAction.FORMAT_PHONE:
            return self._format_phone(record, descriptor, trimmed)
        return trimmed

    def _format_phone(self, record: Record, descriptor: FieldDescriptor, trimmed: str) -> str:
        if not trimmed:
            return trimmed

        country_field = None
        attribute_default = self._default_country
        rule = descriptor.validation
        if isinstance(rule, TelephoneValidationRule):
            country_field = rule.default_country_field
            attribute_default = rule.default_country or attribute_default

        country = self._country_resolver.resolve(
            CountryContext.from_record(
                record,
                attribute_default=attribute_default,
                process_default=self._process_default_country,
                country_field=country_field,
            )
        )

        try:
            result = self._service.format_phone_number(
                self._credentials,
                trimmed,
                default_country=country,
            )
        except VerificationServiceError as e:
            logger.warning(
                "phone_format_failed",
                field_name=descriptor.name,
                error=e.message,
                status_code=e.status_code,
            )
            return trimmed

        if result.status.success and result.formatted_number:
            return result.formatted_number

        logger.info(
            "phone_format_rejected",
            field_name=descriptor.name,
            error=result.status.error_message,
        )
        return trimmed


def apply_changes(
    record: Record,
    changes: list[FieldChange],
    form_state: MutableMapping[str, Any] | None = None,
) -> None:
    """Write normalized values into a record and its parallel form state."""
    for change in changes:
        record.set(change.field_name, change.new_value)
        if form_state is not None:
            form_state[change.field_name] = change.new_value
