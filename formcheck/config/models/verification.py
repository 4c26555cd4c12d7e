"""Verification web service configuration models."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class VerificationConfig(BaseModel):
    """Connection and default settings for the verification service.

    Read-only once loaded: the same instance is shared by every
    normalization and validation call in the process.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default="https://webservices.data-8.co.uk",
        description="Base URL of the verification web service",
    )
    username: str | None = Field(default=None, description="Service username")
    password: SecretStr | None = Field(default=None, description="Service password")
    api_key: SecretStr | None = Field(
        default=None,
        description="API key; takes precedence over username/password",
    )
    default_country: str = Field(
        default="",
        description="Process-wide default country for telephone numbers",
    )
    application_name: str = Field(
        default="formcheck",
        description="Application tag sent with every request",
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds",
    )
