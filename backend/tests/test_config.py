"""Configuration and startup validation tests."""

import pytest

from stayhub.core.config import Settings
from stayhub.core.env_validation import validate_environment


def test_defaults_pass():
    settings = validate_environment(Settings())
    assert settings.app_name == "StayHub"
    assert settings.booking_delay_seconds == 2.0


def test_origins_are_split():
    settings = Settings(allowed_origins="https://a.example, https://b.example,")
    assert settings.origins == ["https://a.example", "https://b.example"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BOOKING_FAILURE_RATE", "0.25")
    monkeypatch.setenv("DEBUG", "true")
    settings = Settings()
    assert settings.booking_failure_rate == 0.25
    assert settings.debug is True


def test_wildcard_cors_rejected_outside_debug():
    with pytest.raises(SystemExit) as exc:
        validate_environment(Settings(allowed_origins="*", debug=False))
    assert exc.value.code == 1


def test_wildcard_cors_allowed_in_debug():
    assert validate_environment(Settings(allowed_origins="*", debug=True)).debug


@pytest.mark.parametrize("overrides", [
    {"booking_failure_rate": 1.5},
    {"booking_failure_rate": -0.1},
    {"auth_delay_seconds": -1},
    {"booking_delay_seconds": -1},
    {"call_timeout_seconds": 0},
])
def test_invalid_values_exit(overrides):
    with pytest.raises(SystemExit):
        validate_environment(Settings(**overrides))
