"""Normalization of form field values.

NormalizationDispatcher is the entry point; the casing helpers, country
resolver and rule table are usable on their own.
"""

from formcheck.normalization.casing import SURNAME_PREFIXES, to_proper_case
from formcheck.normalization.country import FALLBACK_COUNTRY, CountryResolver
from formcheck.normalization.dispatcher import NormalizationDispatcher, apply_changes
from formcheck.normalization.rules import DEFAULT_ACTION, FieldRuleTable

__all__ = [
    "DEFAULT_ACTION",
    "FALLBACK_COUNTRY",
    "SURNAME_PREFIXES",
    "CountryResolver",
    "FieldRuleTable",
    "NormalizationDispatcher",
    "apply_changes",
    "to_proper_case",
]
