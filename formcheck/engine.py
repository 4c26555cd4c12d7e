"""Process-level entry point wiring configuration to the core components.

Usage:
    from formcheck.engine import FormCheck

    with FormCheck.from_settings() as formcheck:
        formcheck.register(contact_type)
        record = formcheck.record("contact", email=" A@B.COM ", phone="020 7946 0000")
        formcheck.standardize(record)
        errors = formcheck.validate(record)
"""

from collections.abc import MutableMapping
from typing import Any

from formcheck.config import Settings, get_settings
from formcheck.fields.models import FieldChange, FieldValidationError, Record, RecordType
from formcheck.normalization.casing import DEFAULT_LOCALE
from formcheck.normalization.dispatcher import NormalizationDispatcher
from formcheck.observability.logging import get_logger, setup_logging_from_config
from formcheck.providers.verification.base import ServiceCredentials, VerificationService
from formcheck.providers.verification.http import HttpVerificationService
from formcheck.validation.validator import RecordValidator

logger = get_logger(__name__)


class UnknownRecordTypeError(KeyError):
    """Raised when a record type has not been registered."""


class FormCheck:
    """Holds the read-only process state shared by every call.

    Credentials and the process default country are resolved once at
    construction and injected into the dispatcher and validator.
    """

    def __init__(
        self,
        service: VerificationService,
        credentials: ServiceCredentials,
        *,
        process_default_country: str = "",
        default_country: str | None = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        """Initialize the engine.

        Args:
            service: Verification service for formatting and validation
            credentials: Credentials sent with every service call
            process_default_country: Process-wide default country
            default_country: Default country for phone fields whose rule names none
            locale: Locale used when proper-casing names
        """
        self._service = service
        self._owns_service = False
        self._record_types: dict[str, RecordType] = {}
        self.dispatcher = NormalizationDispatcher(
            service,
            credentials,
            default_country=default_country,
            process_default_country=process_default_country,
            locale=locale,
        )
        self.validator = RecordValidator(
            service,
            credentials,
            default_country=default_country,
            process_default_country=process_default_country,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        service: VerificationService | None = None,
        **kwargs: Any,
    ) -> "FormCheck":
        """Build an engine from process configuration.

        Logging is configured from the `observability.logging` section first.

        Args:
            settings: Settings to use (defaults to get_settings())
            service: Service override; an HTTP client is built otherwise
            **kwargs: Passed through to the constructor
        """
        settings = settings or get_settings()
        setup_logging_from_config(settings.observability.logging)

        config = settings.verification
        credentials = ServiceCredentials.from_config(config)

        logger.info(
            "formcheck_configured",
            provider=(service.provider_name if service else "http"),
            uses_api_key=credentials.uses_api_key,
            process_default_country=config.default_country or None,
        )
        engine = cls(
            service or HttpVerificationService.from_config(config),
            credentials,
            process_default_country=config.default_country,
            **kwargs,
        )
        engine._owns_service = service is None
        return engine

    def __enter__(self) -> "FormCheck":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the connections of a service this engine built itself."""
        if self._owns_service and isinstance(self._service, HttpVerificationService):
            self._service.close()

    def register(self, record_type: RecordType) -> RecordType:
        """Register a record type under its name."""
        self._record_types[record_type.name] = record_type
        return record_type

    def record_type(self, name: str) -> RecordType:
        try:
            return self._record_types[name]
        except KeyError:
            raise UnknownRecordTypeError(name) from None

    def record(self, type_name: str, **values: Any) -> Record:
        """Create a record of a registered type."""
        return self.record_type(type_name).create(**values)

    def normalize(self, record: Record) -> list[FieldChange]:
        return self.dispatcher.normalize(record)

    def standardize(
        self,
        record: Record,
        form_state: MutableMapping[str, Any] | None = None,
    ) -> list[FieldChange]:
        return self.dispatcher.standardize(record, form_state)

    def validate(self, record: Record) -> list[FieldValidationError]:
        return self.validator.validate(record)
