"""Shared test fixtures for the formcheck test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from formcheck.fields import (
    DataTypeTag,
    EmailValidationRule,
    FieldDescriptor,
    RecordType,
    TelephoneValidationRule,
)
from formcheck.providers.verification import MockVerificationService, ServiceCredentials


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "[verification]\\ndefault_country = 'IE'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            original = self.original_env[key]
            if original is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = original


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Temporarily set environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"FORMCHECK_ENV": "production"}):
                ...
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear cached settings and loaded TOML before and after each test."""
    from formcheck.config import get_settings
    from formcheck.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def credentials() -> ServiceCredentials:
    return ServiceCredentials(username="apikey-test")


@pytest.fixture
def service() -> MockVerificationService:
    return MockVerificationService()


@pytest.fixture
def contact_type() -> RecordType:
    """A contact form with every supported data-type tag."""
    return RecordType(
        name="contact",
        descriptors=(
            FieldDescriptor(name="first_name", data_type=DataTypeTag.FIRST_NAME),
            FieldDescriptor(name="last_name", data_type=DataTypeTag.LAST_NAME),
            FieldDescriptor(
                name="email",
                data_type=DataTypeTag.EMAIL_ADDRESS,
                display_name="Email address",
                validation=EmailValidationRule(),
            ),
            FieldDescriptor(
                name="phone",
                data_type=DataTypeTag.PHONE_NUMBER,
                display_name="Telephone",
                validation=TelephoneValidationRule(),
            ),
            FieldDescriptor(name="country", data_type=DataTypeTag.COUNTRY),
            FieldDescriptor(name="reference", read_only=True),
            FieldDescriptor(name="notes"),
        ),
    )
