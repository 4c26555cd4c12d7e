"""Default country resolution for telephone numbers."""

from formcheck.fields.models import CountryContext

FALLBACK_COUNTRY = "GB"


class CountryResolver:
    """Resolves the country assumed for numbers without an international prefix.

    Precedence, highest first:
    1. The value of a sibling Country field in the same record
    2. The default configured on the rule being applied
    3. The process-wide default
    4. FALLBACK_COUNTRY

    Values are passed through verbatim; ISO codes, country names and
    dialling codes are all left for the verification service to interpret.
    """

    def __init__(self, fallback: str = FALLBACK_COUNTRY) -> None:
        self._fallback = fallback

    def resolve(self, context: CountryContext) -> str:
        for candidate in (
            context.explicit_sibling_value,
            context.attribute_default,
            context.process_default,
        ):
            if candidate and candidate.strip():
                return candidate
        return self._fallback
