"""
typeid_sdk.tier0_core.config
─────────────────────────────
Typed configuration with env layering. Reads from .env → environment
variables. All fields are typed via Pydantic; invalid values fail when the
settings are first loaded, not when an id is parsed.

Minimal stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TypeIDSettings(BaseSettings):
    """
    Typed library configuration. All env vars are prefixed with TYPEID_.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", alias="TYPEID_ENV")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="TYPEID_LOG_LEVEL")
    log_format: str = Field(default="json", alias="TYPEID_LOG_FORMAT")

    # ── Error reporting ───────────────────────────────────────────────────────
    error_backend: str = Field(default="none", alias="TYPEID_ERROR_BACKEND")

    @field_validator("environment")
    @classmethod
    def validate_env(cls, v: str) -> str:
        allowed = {"development", "staging", "production", "test"}
        if v.lower() not in allowed:
            raise ValueError(f"environment must be one of {allowed}, got {v!r}")
        return v.lower()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in {"json", "console"}:
            raise ValueError(f"log_format must be 'json' or 'console', got {v!r}")
        return v.lower()

    @field_validator("error_backend")
    @classmethod
    def validate_error_backend(cls, v: str) -> str:
        if v.lower() not in {"none", "log"}:
            raise ValueError(f"error_backend must be 'none' or 'log', got {v!r}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"


@lru_cache(maxsize=1)
def get_config() -> TypeIDSettings:
    """
    Return the singleton settings object. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    return TypeIDSettings()


def _reset_config() -> None:
    """For tests — clear the config cache."""
    get_config.cache_clear()


__sdk_export__ = {
    "exports": ["get_config", "TypeIDSettings"],
    "description": "Environment-driven settings for logging and error capture",
    "tier": "tier0_core",
    "module": "config",
}
