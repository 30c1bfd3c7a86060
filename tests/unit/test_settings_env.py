from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ums_api.settings import Settings, get_settings, reload_settings


def test_settings_defaults() -> None:
    settings = get_settings()

    assert settings.app_name == "User Management API"
    assert settings.caller_header == "Authorization"
    assert settings.seed_users is True
    assert settings.expose_missing_permissions is False
    assert settings.api_docs_enabled is False
    assert settings.logging_level == "INFO"


def test_settings_reads_from_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Values stored in a local .env file should be honoured."""

    env_file = tmp_path / ".env"
    env_file.write_text(
        """
UMS_APP_NAME=UMS Test
UMS_API_DOCS_ENABLED=true
UMS_SERVER_CORS_ORIGINS=http://localhost:3000,http://example.dev:4000
UMS_CALLER_HEADER=X-User-Id
"""
    )

    monkeypatch.chdir(tmp_path)
    reload_settings()

    settings = get_settings()

    assert settings.app_name == "UMS Test"
    assert settings.api_docs_enabled is True
    assert settings.server_cors_origins == [
        "http://localhost:3000",
        "http://example.dev:4000",
    ]
    assert settings.caller_header == "X-User-Id"


def test_settings_env_var_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables should have the final say."""

    monkeypatch.setenv("UMS_APP_NAME", "Env Override")
    monkeypatch.setenv("UMS_SEED_USERS", "false")
    monkeypatch.setenv("UMS_EXPOSE_MISSING_PERMISSIONS", "true")
    monkeypatch.setenv("UMS_LOGGING_LEVEL", "debug")
    reload_settings()

    settings = get_settings()

    assert settings.app_name == "Env Override"
    assert settings.seed_users is False
    assert settings.expose_missing_permissions is True
    assert settings.logging_level == "DEBUG"


def test_cors_accepts_json_array(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(
        "UMS_SERVER_CORS_ORIGINS",
        '["http://a.test", "http://b.test", "http://a.test"]',
    )

    settings = reload_settings()

    assert settings.server_cors_origins == ["http://a.test", "http://b.test"]


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_blank_caller_header_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(caller_header="   ")
