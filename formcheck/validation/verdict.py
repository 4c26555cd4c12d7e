"""Interpretation of verification service results."""

from pydantic import BaseModel, ConfigDict, Field

from formcheck.fields.enums import EmailResultCode, PhoneResultCode, VerificationKind
from formcheck.providers.verification.base import VerificationOutcome

# Strictness flag names as sent to the service
TREAT_UNAVAILABLE_MOBILE_AS_INVALID = "TreatUnavailableMobileAsInvalid"
TREAT_NO_COVERAGE_AS_INVALID = "TreatNoCoverageAsInvalid"


class VerdictPolicy(BaseModel):
    """How ambiguous telephone results are judged."""

    model_config = ConfigDict(frozen=True)

    treat_no_coverage_as_invalid: bool = Field(
        default=False,
        description="Reject numbers from countries the service cannot check",
    )
    treat_unavailable_as_invalid: bool = Field(
        default=False,
        description="Reject mobiles that are switched off or unreachable",
    )

    @classmethod
    def from_flags(cls, flags: dict[str, bool]) -> "VerdictPolicy":
        return cls(
            treat_no_coverage_as_invalid=flags.get(TREAT_NO_COVERAGE_AS_INVALID, False),
            treat_unavailable_as_invalid=flags.get(TREAT_UNAVAILABLE_MOBILE_AS_INVALID, False),
        )

    def as_flags(self) -> dict[str, bool]:
        return {
            TREAT_UNAVAILABLE_MOBILE_AS_INVALID: self.treat_unavailable_as_invalid,
            TREAT_NO_COVERAGE_AS_INVALID: self.treat_no_coverage_as_invalid,
        }


class VerdictInterpreter:
    """Turns a VerificationOutcome into accept/reject.

    A service that could not be reached or could not process the request
    never causes a rejection: an unproven value is accepted.
    """

    def interpret(
        self,
        outcome: VerificationOutcome,
        policy: VerdictPolicy | None = None,
        kind: VerificationKind = VerificationKind.PHONE,
    ) -> bool:
        if not outcome.service_call_succeeded:
            return True

        if kind == VerificationKind.EMAIL:
            return outcome.result_code != EmailResultCode.INVALID

        policy = policy or VerdictPolicy()
        code = outcome.result_code

        if code == PhoneResultCode.VALID:
            return True
        if code == PhoneResultCode.NO_COVERAGE:
            return not policy.treat_no_coverage_as_invalid
        if code == PhoneResultCode.UNAVAILABLE:
            return not policy.treat_unavailable_as_invalid
        return False
