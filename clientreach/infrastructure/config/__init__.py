from .settings import (
    GeminiSettings,
    PlacesSettings,
    ServerSettings,
    Settings,
    WhatsAppSettings,
    get_settings,
)

__all__ = [
    "GeminiSettings",
    "PlacesSettings",
    "ServerSettings",
    "Settings",
    "WhatsAppSettings",
    "get_settings",
]
