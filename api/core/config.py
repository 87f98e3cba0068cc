"""
Application settings.

All configuration is read once at startup through `load_settings()`. The
result is passed to `create_app()` and stored on `app.state.settings`; nothing
else in the codebase reads `os.environ` for request-serving configuration.

Required:
- DATABASE_URL   postgres connection string
- JWT_SECRET     HMAC secret for session tokens

Optional Pusher variables only enable realtime features; their absence is
reported as a warning, never as a failure.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_APP_URL = "http://localhost:3000"

PUSHER_ENV_VARS = {
    "pusher_app_id": "PUSHER_APP_ID",
    "pusher_key": "NEXT_PUBLIC_PUSHER_KEY",
    "pusher_secret": "PUSHER_SECRET",
    "pusher_cluster": "NEXT_PUBLIC_PUSHER_CLUSTER",
}


class ConfigurationError(RuntimeError):
    pass


class Settings(BaseSettings):
    database_url: str = Field(..., min_length=1, validation_alias="DATABASE_URL")
    jwt_secret: str = Field(..., min_length=1, validation_alias="JWT_SECRET")
    refresh_token_secret: str | None = Field(default=None, validation_alias="REFRESH_TOKEN_SECRET")
    jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALG")
    access_token_expire_minutes: int = Field(default=15, ge=1, validation_alias="ACCESS_TOKEN_EXPIRE_MIN")
    refresh_token_expire_days: int = Field(default=7, ge=1, validation_alias="REFRESH_TOKEN_EXPIRE_DAYS")

    app_url: str = Field(default=DEFAULT_APP_URL, validation_alias="NEXT_PUBLIC_APP_URL")
    environment: Literal["development", "production", "test"] = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "ENVIRONMENT"),
    )
    cors_origins: str = Field(default="", validation_alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    pusher_app_id: str | None = Field(default=None, validation_alias="PUSHER_APP_ID")
    pusher_key: str | None = Field(default=None, validation_alias="NEXT_PUBLIC_PUSHER_KEY")
    pusher_secret: str | None = Field(default=None, validation_alias="PUSHER_SECRET")
    pusher_cluster: str | None = Field(default=None, validation_alias="NEXT_PUBLIC_PUSHER_CLUSTER")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("database_url", "jwt_secret")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("database_url")
    @classmethod
    def _postgres_scheme(cls, value: str) -> str:
        if not value.startswith(("postgres://", "postgresql://")):
            raise ValueError("must be a postgres:// or postgresql:// connection string")
        return value

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def effective_refresh_secret(self) -> str:
        return (self.refresh_token_secret or "").strip() or self.jwt_secret

    @property
    def cors_origins_list(self) -> list[str]:
        raw = self.cors_origins.strip() or self.app_url
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    @property
    def missing_pusher_vars(self) -> list[str]:
        return [env for field, env in PUSHER_ENV_VARS.items() if not getattr(self, field)]

    @property
    def realtime_enabled(self) -> bool:
        return not self.missing_pusher_vars


def _field_env_name(field_name: str) -> str:
    field = Settings.model_fields.get(field_name)
    alias = field.validation_alias if field is not None else None
    if isinstance(alias, str):
        return alias
    if isinstance(alias, AliasChoices):
        return str(alias.choices[0])
    return field_name.upper()


def _format_validation_error(exc: ValidationError) -> str:
    lines = []
    for error in exc.errors():
        location = error.get("loc") or ("?",)
        name = str(location[0])
        if name in Settings.model_fields:
            name = _field_env_name(name)
        lines.append(f"  - {name}: {error.get('msg', 'invalid value')}")
    details = "\n".join(lines)
    return (
        "Invalid environment variables:\n"
        f"{details}\n\n"
        "Required env vars: DATABASE_URL, JWT_SECRET. "
        "Set these in your .env file or the process environment."
    )


def load_settings(**overrides: object) -> Settings:
    """
    Build and validate settings; raise ConfigurationError on any violation.

    Keyword overrides take precedence over the environment (used by tests and
    by callers that assemble configuration themselves).
    """
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc

    missing_optional = settings.missing_pusher_vars
    if missing_optional:
        logger.warning(
            "Optional env vars not set (realtime disabled): %s",
            ", ".join(missing_optional),
        )
    return settings
