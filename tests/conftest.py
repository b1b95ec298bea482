"""Shared fixtures for formguard tests."""

import os

import pytest
import structlog

from formguard import Settings, Validator, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop FORMGUARD_* env vars and reset cached settings and logging config."""
    for key in list(os.environ):
        if key.startswith("FORMGUARD_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings():
    """Default settings, ignoring any .env file in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def validator(settings):
    return Validator(settings=settings)


@pytest.fixture
def strict_validator(settings):
    return Validator(settings=settings, equality_policy="strict")
