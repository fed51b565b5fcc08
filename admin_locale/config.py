from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

DEFAULT_MAX_LOCALES_SHOWN_ON_INDEX = 4


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Admin Locale Field"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./admin_locale.db"

    # Locale settings (LOCALES is read as JSON, e.g. '{"en": "English", "fr": "French"}')
    locales: dict[str, str] = {"en": "English"}
    max_locales_shown_on_index: int = DEFAULT_MAX_LOCALES_SHOWN_ON_INDEX

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()


@dataclass
class LocaleConfig:
    """
    Locale configuration shared by locale fields and filters.

    Attributes:
        locales:                     Ordered mapping of locale code -> label.
        max_locales_shown_on_index:  Above this many locales the locale field
                                     is hidden from index listings.
    """

    locales: dict[str, str] = field(default_factory=dict)
    max_locales_shown_on_index: int = DEFAULT_MAX_LOCALES_SHOWN_ON_INDEX

    @classmethod
    def from_settings(cls, source: Settings) -> LocaleConfig:
        return cls(
            locales=dict(source.locales),
            max_locales_shown_on_index=source.max_locales_shown_on_index,
        )

    @classmethod
    def from_provider(
        cls,
        provider: Callable[[], Mapping[str, str] | None],
        max_locales_shown_on_index: int = DEFAULT_MAX_LOCALES_SHOWN_ON_INDEX,
    ) -> LocaleConfig:
        """Build a config from a no-argument callable returning the locale mapping.

        The provider is called once; a ``None`` result is treated as no locales.
        """
        return cls(
            locales=dict(provider() or {}),
            max_locales_shown_on_index=max_locales_shown_on_index,
        )


@lru_cache
def get_locale_config() -> LocaleConfig:
    """Return the process-wide LocaleConfig built from settings."""
    return LocaleConfig.from_settings(settings)
