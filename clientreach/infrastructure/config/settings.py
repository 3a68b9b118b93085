"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclass for safety and clarity
- Single source of truth for all configurable values

Missing credentials are NOT replaced by defaults. Each client raises
ConfigurationError before making a request when its key is empty.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env file if present (development convenience)
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def _env_origins() -> Tuple[str, ...]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class GeminiSettings:
    """Google Gemini text generation settings."""

    api_key: str = field(default_factory=lambda: os.getenv("GOOGLE_AI_API_KEY", ""))
    api_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = field(default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"))
    timeout_seconds: float = field(default_factory=lambda: _env_float("HTTP_TIMEOUT_SECONDS", 30.0))


@dataclass(frozen=True)
class PlacesSettings:
    """Google Places (New) text search settings."""

    api_key: str = field(default_factory=lambda: os.getenv("GOOGLE_PLACES_API_KEY", ""))
    search_url: str = "https://places.googleapis.com/v1/places:searchText"

    # Only these attributes are returned per place
    field_mask: str = (
        "places.displayName,"
        "places.formattedAddress,"
        "places.priceLevel,"
        "places.internationalPhoneNumber,"
        "places.userRatingCount"
    )
    timeout_seconds: float = field(default_factory=lambda: _env_float("HTTP_TIMEOUT_SECONDS", 30.0))


@dataclass(frozen=True)
class WhatsAppSettings:
    """WhatsApp gateway settings (sign-in, then send-many)."""

    api_url: str = field(default_factory=lambda: os.getenv("WHATSAPP_API_URL", "").rstrip("/"))
    username: str = field(default_factory=lambda: os.getenv("WHATSAPP_USERNAME", ""))
    password: str = field(default_factory=lambda: os.getenv("WHATSAPP_PASSWORD", ""))

    # Pre-issued token; skips the sign-in call when set
    access_token: str = field(default_factory=lambda: os.getenv("WHATSAPP_ACCESS_TOKEN", ""))

    sign_in_path: str = "/api/auth/sign-in"
    send_many_path: str = "/api/whatsapp-web/send-many-message"
    timeout_seconds: float = field(default_factory=lambda: _env_float("HTTP_TIMEOUT_SECONDS", 30.0))

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_token or (self.username and self.password))


@dataclass(frozen=True)
class ServerSettings:
    """HTTP server and CORS settings."""

    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    cors_origins: Tuple[str, ...] = field(default_factory=_env_origins)


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from clientreach.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.gemini.model)
    """

    # Sub-settings groups
    gemini: GeminiSettings = field(default_factory=GeminiSettings)
    places: PlacesSettings = field(default_factory=PlacesSettings)
    whatsapp: WhatsAppSettings = field(default_factory=WhatsAppSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    # File paths
    database_file: Path = field(
        default_factory=lambda: Path(os.getenv("DATABASE_FILE", "clientreach.db"))
    )

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings/errors.
        Returns empty list if all settings are valid.
        """
        issues = []

        if not self.gemini.api_key:
            issues.append(
                "WARNING: GOOGLE_AI_API_KEY not set. "
                "AI endpoints will respond with 500."
            )

        if not self.places.api_key:
            issues.append(
                "WARNING: GOOGLE_PLACES_API_KEY not set. "
                "Potential client search will respond with 500."
            )

        if not self.whatsapp.api_url:
            issues.append(
                "WARNING: WHATSAPP_API_URL not set. "
                "Campaign dispatch is disabled."
            )
        elif not self.whatsapp.has_credentials:
            issues.append(
                "WARNING: Neither WHATSAPP_ACCESS_TOKEN nor "
                "WHATSAPP_USERNAME/WHATSAPP_PASSWORD set. "
                "Campaign dispatch is disabled."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
