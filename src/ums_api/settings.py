"""UMS settings (conventional Pydantic v2)."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import DotEnvSettingsSource, EnvSettingsSource

# ---- Defaults ---------------------------------------------------------------

DEFAULT_CORS_ORIGINS = ["http://localhost:5173"]
DEFAULT_CALLER_HEADER = "Authorization"

_LENIENT_LIST_FIELDS = {"server_cors_origins"}


# ---- Helpers ----------------------------------------------------------------

def _list_from_env(value: Any, *, default: list[str]) -> list[str]:
    """JSON array or comma string; strip empties; dedupe preserving order."""
    if value in (None, "", []):
        items = list(default)
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            items = list(default)
        elif s.startswith("["):
            try:
                parsed = json.loads(s)
            except json.JSONDecodeError as exc:
                raise ValueError("Expected a JSON array") from exc
            if not isinstance(parsed, list):
                raise ValueError("Expected a JSON array")
            items = [str(x).strip() for x in parsed if str(x).strip()]
        else:
            items = [seg.strip() for seg in s.split(",") if seg.strip()]
    elif isinstance(value, (list, tuple, set)):
        items = [str(x).strip() for x in value if str(x).strip()]
    else:
        raise TypeError("Expected string or list")

    return list(dict.fromkeys(items))


# ---- Settings ---------------------------------------------------------------

class _LenientEnvSettingsSource(EnvSettingsSource):
    """Environment source that preserves raw strings for list-like fields."""

    lenient_fields: ClassVar[set[str]] = _LENIENT_LIST_FIELDS

    def prepare_field_value(self, field_name: str, field, value: Any, value_is_complex: bool) -> Any:
        if field_name in self.lenient_fields and isinstance(value, str):
            return value
        return super().prepare_field_value(field_name, field, value, value_is_complex)


class _LenientDotEnvSettingsSource(DotEnvSettingsSource):
    """Dotenv source that preserves raw strings for list-like fields."""

    lenient_fields: ClassVar[set[str]] = _LENIENT_LIST_FIELDS

    def prepare_field_value(self, field_name: str, field, value: Any, value_is_complex: bool) -> Any:
        if field_name in self.lenient_fields and isinstance(value, str):
            return value
        return super().prepare_field_value(field_name, field, value, value_is_complex)


class Settings(BaseSettings):
    """FastAPI settings loaded from UMS_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="UMS_",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        env_source = _LenientEnvSettingsSource(
            settings_cls,
            case_sensitive=getattr(env_settings, "case_sensitive", None),
            env_prefix=getattr(env_settings, "env_prefix", None),
            env_nested_delimiter=getattr(env_settings, "env_nested_delimiter", None),
            env_ignore_empty=getattr(env_settings, "env_ignore_empty", None),
            env_parse_none_str=getattr(env_settings, "env_parse_none_str", None),
            env_parse_enums=getattr(env_settings, "env_parse_enums", None),
        )
        dotenv_source = _LenientDotEnvSettingsSource(
            settings_cls,
            env_file=getattr(dotenv_settings, "env_file", None),
            env_file_encoding=getattr(dotenv_settings, "env_file_encoding", None),
            case_sensitive=getattr(dotenv_settings, "case_sensitive", None),
            env_prefix=getattr(dotenv_settings, "env_prefix", None),
            env_nested_delimiter=getattr(dotenv_settings, "env_nested_delimiter", None),
            env_ignore_empty=getattr(dotenv_settings, "env_ignore_empty", None),
            env_parse_none_str=getattr(dotenv_settings, "env_parse_none_str", None),
            env_parse_enums=getattr(dotenv_settings, "env_parse_enums", None),
        )
        return (init_settings, env_source, dotenv_source, file_secret_settings)

    # Core
    app_name: str = "User Management API"
    app_version: str = "0.3.0"
    api_docs_enabled: bool = False
    docs_url: str = "/docs"
    redoc_url: str = "/redoc"
    openapi_url: str = "/openapi.json"
    logging_level: str = "INFO"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = Field(8000, ge=1, le=65535)
    server_cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    # Access control
    caller_header: str = DEFAULT_CALLER_HEADER
    expose_missing_permissions: bool = False

    # Directory
    seed_users: bool = True

    # ---- Validators ----

    @field_validator("logging_level", mode="before")
    @classmethod
    def _v_log_level(cls, v: Any) -> str:
        s = ("" if v is None else str(v).strip()).upper()
        return s or "INFO"

    @field_validator("server_cors_origins", mode="before")
    @classmethod
    def _v_cors(cls, v: Any) -> list[str]:
        return _list_from_env(v, default=DEFAULT_CORS_ORIGINS)

    @field_validator("caller_header", mode="before")
    @classmethod
    def _v_caller_header(cls, v: Any) -> str:
        s = "" if v is None else str(v).strip()
        if not s:
            raise ValueError("UMS_CALLER_HEADER must not be blank")
        return s


@lru_cache(maxsize=1)
def _build_settings() -> Settings:
    return Settings()


def get_settings() -> Settings:
    return _build_settings()


def reload_settings() -> Settings:
    _build_settings.cache_clear()
    return _build_settings()


__all__ = [
    "DEFAULT_CALLER_HEADER",
    "DEFAULT_CORS_ORIGINS",
    "Settings",
    "get_settings",
    "reload_settings",
]
