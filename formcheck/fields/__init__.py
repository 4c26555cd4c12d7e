"""Form field metadata: data-type tags, field descriptors and records."""

from formcheck.fields.enums import (
    DataTypeTag,
    EmailResultCode,
    EmailValidationLevel,
    FieldAction,
    PhoneResultCode,
    VerificationKind,
)
from formcheck.fields.models import (
    CountryContext,
    EmailValidationRule,
    FieldChange,
    FieldDescriptor,
    FieldValidationError,
    Record,
    RecordType,
    TelephoneValidationRule,
)

__all__ = [
    # Enums
    "DataTypeTag",
    "EmailResultCode",
    "EmailValidationLevel",
    "FieldAction",
    "PhoneResultCode",
    "VerificationKind",
    # Models
    "CountryContext",
    "EmailValidationRule",
    "FieldChange",
    "FieldDescriptor",
    "FieldValidationError",
    "Record",
    "RecordType",
    "TelephoneValidationRule",
]
