import pytest
from pydantic import ValidationError

from src.routeplanner.config import Settings


def test_defaults():
    config = Settings(_env_file=None)

    assert config.api_prefix == "/api"
    assert config.default_algorithm == "2opt"
    assert config.default_average_speed_kmh == 30.0
    assert config.two_opt_epsilon == 1e-9
    assert config.two_opt_max_passes == 1000


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ROUTEPLANNER_DEFAULT_AVERAGE_SPEED_KMH", "45")
    monkeypatch.setenv("ROUTEPLANNER_DEFAULT_ALGORITHM", "nearest-neighbor")
    monkeypatch.setenv("ROUTEPLANNER_LOG_LEVEL", "debug")
    monkeypatch.setenv("ROUTEPLANNER_FRONTEND_ALLOWED_ORIGINS", '["https://ops.example.com", "https://app.example.com"]')

    config = Settings(_env_file=None)

    assert config.default_average_speed_kmh == 45.0
    assert config.default_algorithm == "nearest-neighbor"
    assert config.log_level == "DEBUG"
    assert config.frontend_allowed_origins == ("https://ops.example.com", "https://app.example.com")


def test_rejects_non_positive_default_speed(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ROUTEPLANNER_DEFAULT_AVERAGE_SPEED_KMH", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_origins_from_comma_separated_value():
    config = Settings(_env_file=None, frontend_allowed_origins="https://a.example.com, https://b.example.com")

    assert config.frontend_allowed_origins == ("https://a.example.com", "https://b.example.com")
