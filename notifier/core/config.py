"""
Environment configuration — single source of truth for all settings.

Uses pydantic-settings for type-safe config with .env file support.
Every variable is read with the ``NOTIFIER_`` prefix, e.g.
``NOTIFIER_LANGUAGE=pt-BR``. All values have sensible defaults so the
demo runs with no environment at all.

Usage:
    from notifier.core.config import settings
    print(settings.CURRENCY_SYMBOL)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings loaded from environment variables or .env file.

    Precedence: env var > .env file > default value
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NOTIFIER_",
        case_sensitive=True,
        extra="ignore",
    )

    # ── Application ──
    APP_NAME: str = "Notification System (Factory Method)"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"  # development | production
    LOG_LEVEL: str = "WARNING"  # DEBUG | INFO | WARNING | ERROR | CRITICAL
    LOG_JSON: bool = False  # force JSON logs outside production

    # ── Localisation ──
    LANGUAGE: str = "en"  # en | pt-BR
    CURRENCY_SYMBOL: str = "R$"

    # ── Channel defaults applied by the factories ──
    EMAIL_USE_HTML: bool = True
    PUSH_DEFAULT_BADGE: int = 1
    WHATSAPP_USE_TEMPLATE: bool = True

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
