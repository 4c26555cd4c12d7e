"""Enums for the form field domain."""

from enum import Enum


class DataTypeTag(str, Enum):
    """Semantic data-type tags recognised on form fields.

    Matching is exact. Tags outside this vocabulary are carried on a
    FieldDescriptor as plain strings and normalized with the default action.
    """

    EMAIL_ADDRESS = "EmailAddress"
    PHONE_NUMBER = "PhoneNumber"
    COUNTRY = "Country"
    FIRST_NAME = "FirstName"
    FORENAME = "Forename"  # Alias of FirstName
    LAST_NAME = "LastName"
    SURNAME = "Surname"  # Alias of LastName


class FieldAction(str, Enum):
    """Normalization applied to a field value."""

    TRIM = "trim"
    LOWERCASE_EMAIL = "lowercase_email"
    FORMAT_PHONE = "format_phone"
    PROPER_CASE_FIRST_NAME = "proper_case_first_name"
    PROPER_CASE_LAST_NAME = "proper_case_last_name"


class VerificationKind(str, Enum):
    """What the verification service is asked to check."""

    EMAIL = "email"
    PHONE = "phone"


class PhoneResultCode(str, Enum):
    """Telephone validation result codes reported by the service."""

    VALID = "Valid"
    INVALID = "Invalid"
    NO_COVERAGE = "NoCoverage"  # Country not covered by the service
    UNAVAILABLE = "Unavailable"  # Mobile switched off or unreachable
    AMBIGUOUS = "Ambiguous"


class EmailResultCode(str, Enum):
    """Email validation result codes reported by the service."""

    VALID = "Valid"
    INVALID = "Invalid"


class EmailValidationLevel(str, Enum):
    """Depth of email checking requested from the service.

    Deeper levels respond more slowly but let fewer invalid addresses through.
    """

    SYNTAX = "Syntax"  # Syntax only
    MX = "MX"  # Domain is configured to receive email
    SERVER = "Server"  # Mail servers for the domain are running
    ADDRESS = "Address"  # Mailbox exists
