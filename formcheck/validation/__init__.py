"""Validation of email addresses and telephone numbers.

RecordValidator validates whole records; ValidationAttempt checks a single
value and VerdictInterpreter judges what the service reported.
"""

from formcheck.validation.attempt import ValidationAttempt, ValidationOutcome
from formcheck.validation.validator import RecordValidator
from formcheck.validation.verdict import (
    TREAT_NO_COVERAGE_AS_INVALID,
    TREAT_UNAVAILABLE_MOBILE_AS_INVALID,
    VerdictInterpreter,
    VerdictPolicy,
)

__all__ = [
    "TREAT_NO_COVERAGE_AS_INVALID",
    "TREAT_UNAVAILABLE_MOBILE_AS_INVALID",
    "RecordValidator",
    "ValidationAttempt",
    "ValidationOutcome",
    "VerdictInterpreter",
    "VerdictPolicy",
]
