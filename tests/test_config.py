"""Settings defaults and environment overrides."""
import pytest
from pydantic import ValidationError

from easybizness_mail.core.config import Settings

ENV_VARS = [
    "MAILTRAP_HOST",
    "MAILTRAP_PORT",
    "MAILTRAP_USER",
    "MAILTRAP_PASS",
    "MAILTRAP_FROM_EMAIL",
    "MAILTRAP_FROM_NAME",
    "PORT",
    "CORS_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.MAILTRAP_HOST == "sandbox.smtp.mailtrap.io"
    assert settings.MAILTRAP_PORT == 2525
    assert settings.MAILTRAP_USER is None
    assert settings.MAILTRAP_PASS is None
    assert settings.MAILTRAP_FROM_EMAIL == "no-reply@example.com"
    assert settings.MAILTRAP_FROM_NAME == "EasyBizness"
    assert settings.PORT == 5174
    assert settings.cors_origins_list == ["*"]


def test_environment_overrides(clean_env):
    clean_env.setenv("MAILTRAP_HOST", "live.smtp.mailtrap.io")
    clean_env.setenv("MAILTRAP_PORT", "587")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = Settings(_env_file=None)

    assert settings.MAILTRAP_HOST == "live.smtp.mailtrap.io"
    assert settings.MAILTRAP_PORT == 587
    assert settings.PORT == 8080
    assert settings.cors_origins_list == ["https://a.example", "https://b.example"]


def test_settings_are_immutable(clean_env):
    settings = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.MAILTRAP_HOST = "elsewhere"
