"""Intl engine configuration settings."""

from typing import Annotated, Any, Optional
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")

# Locales commonly served by the engine, in declaration order. Base-language
# matches favour earlier entries (e.g. "en" resolves to "en-US").
DEFAULT_LOCALES: tuple[str, ...] = (
    "en-US",  # English (United States)
    "en-GB",  # English (United Kingdom)
    "en-AU",  # English (Australia)
    "en-CA",  # English (Canada)
    "en-IN",  # English (India)
    "id-ID",  # Indonesian (Indonesia)
    "ms-MY",  # Malay (Malaysia)
    "zh-CN",  # Chinese (Simplified, China)
    "zh-TW",  # Chinese (Traditional, Taiwan)
    "zh-HK",  # Chinese (Traditional, Hong Kong)
    "ja-JP",  # Japanese (Japan)
    "ko-KR",  # Korean (Korea)
    "th-TH",  # Thai (Thailand)
    "vi-VN",  # Vietnamese (Vietnam)
    "fr-FR",  # French (France)
    "fr-CA",  # French (Canada)
    "es-ES",  # Spanish (Spain)
    "es-MX",  # Spanish (Mexico)
    "pt-PT",  # Portuguese (Portugal)
    "pt-BR",  # Portuguese (Brazil)
    "de-DE",  # German (Germany)
    "it-IT",  # Italian (Italy)
    "nl-NL",  # Dutch (Netherlands)
    "ru-RU",  # Russian (Russia)
    "tr-TR",  # Turkish (Turkey)
    "ar-SA",  # Arabic (Saudi Arabia)
    "he-IL",  # Hebrew (Israel)
    "hi-IN",  # Hindi (India)
    "bn-BD",  # Bengali (Bangladesh)
    "ta-IN",  # Tamil (India)
    "ur-PK",  # Urdu (Pakistan)
)


class I18nSettings(BaseSettings):
    """Locale negotiation and catalog settings."""

    DEFAULT_LOCALE: str = Field(default="en-US", alias="I18N_DEFAULT_LOCALE")
    SUPPORTED_LOCALES: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_LOCALES),
        alias="I18N_SUPPORTED_LOCALES",
    )
    STRICT_CATALOGS: bool = Field(default=False, alias="I18N_STRICT_CATALOGS")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("SUPPORTED_LOCALES", mode="before")
    @classmethod
    def _parse_supported_locales(cls, v: Optional[Any]) -> Any:
        """Allow `I18N_SUPPORTED_LOCALES` as a JSON list, a comma-separated
        string, or a native list.
        """
        if v is None:
            return list(DEFAULT_LOCALES)

        if isinstance(v, (list, tuple)):
            return [str(item).strip() for item in v if str(item).strip()]

        if isinstance(v, str):
            raw = v.strip()
            if raw.startswith("["):
                try:
                    parsed = json.loads(raw)
                except json.JSONDecodeError as e:
                    logger.warning("invalid_supported_locales_json", error=str(e))
                    raise ValueError(
                        f"I18N_SUPPORTED_LOCALES is not valid JSON: {raw}"
                    ) from e
                return [str(item).strip() for item in parsed if str(item).strip()]
            return [part.strip() for part in raw.split(",") if part.strip()]

        return v


class Settings(BaseSettings):
    """Intl engine configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
