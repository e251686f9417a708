import pytest
from pydantic import ValidationError

from here_geocoder.config import (
    GEOCODE_ENDPOINT_URL,
    REVERSE_ENDPOINT_URL,
    AppConfig,
    get_config,
    reset_config,
)


def test_defaults(monkeypatch):
    for name in ("HERE_API_KEY", "HERE_GEOCODE_ENDPOINT", "HERE_REVERSE_ENDPOINT", "HERE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig()

    assert config.here.api_key is None
    assert config.here.geocode_endpoint == GEOCODE_ENDPOINT_URL
    assert config.here.reverse_endpoint == REVERSE_ENDPOINT_URL
    assert config.http.timeout_seconds == 10.0
    assert config.observability.level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HERE_API_KEY", "secret")
    monkeypatch.setenv("HERE_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("HERE_HTTP_USER_AGENT", "my-app/1.0")
    monkeypatch.setenv("HERE_LOG_LEVEL", "DEBUG")

    config = AppConfig()

    assert config.here.api_key.get_secret_value() == "secret"
    assert "secret" not in repr(config.here)
    assert config.http.timeout_seconds == 2.5
    assert config.http.user_agent == "my-app/1.0"
    assert config.observability.level == "DEBUG"


def test_get_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("HERE_API_KEY", "rotated")
    reset_config()

    assert get_config() is not first
    assert get_config().here.api_key.get_secret_value() == "rotated"


def test_log_level_is_validated(monkeypatch):
    monkeypatch.setenv("HERE_LOG_LEVEL", "debug")
    assert AppConfig().observability.level == "DEBUG"

    monkeypatch.setenv("HERE_LOG_LEVEL", "bogus")
    with pytest.raises(ValidationError):
        AppConfig()
