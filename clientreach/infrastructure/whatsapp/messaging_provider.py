"""
Messaging Provider - Abstraction Layer for WhatsApp Messaging
==============================================================

Provides a unified interface for sending WhatsApp message batches.
Currently supports a self-hosted WhatsApp Web gateway with a REST API.

USAGE:
    provider = GatewayProvider()
    token = provider.authenticate()
    provider.send_many(token, [CampaignEntry("923001234567", "Hello!")])

Delivery is acknowledged per batch. The gateway does not report
per-recipient results.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import requests

from ..config import WhatsAppSettings, get_settings
from ...domain.errors import ConfigurationError, UpstreamError
from ...domain.models import CampaignEntry

logger = logging.getLogger(__name__)


class MessagingProvider(ABC):
    """
    Abstract base class for WhatsApp messaging providers.
    Implement this interface to add new messaging backends.
    """

    @abstractmethod
    def authenticate(self) -> str:
        """Obtain a delivery credential. Raises on failure."""
        ...

    @abstractmethod
    def send_many(self, token: str, entries: Sequence[CampaignEntry]) -> None:
        """Send the whole batch in one call. Raises on failure."""
        ...


class GatewayProvider(MessagingProvider):
    """
    WhatsApp Web gateway: sign in, then send-many.

    A configured WHATSAPP_ACCESS_TOKEN is used as-is. Otherwise the
    username/password pair is exchanged for a token on every batch.
    """

    SERVICE = "whatsapp"

    def __init__(self, settings: Optional[WhatsAppSettings] = None):
        self._settings = settings or get_settings().whatsapp

    def _require_config(self) -> None:
        if not self._settings.api_url:
            raise ConfigurationError("WhatsApp API URL not configured.")
        if not self._settings.has_credentials:
            raise ConfigurationError("WhatsApp API credentials not configured.")

    def authenticate(self) -> str:
        self._require_config()

        if self._settings.access_token:
            return self._settings.access_token

        url = f"{self._settings.api_url}{self._settings.sign_in_path}"
        try:
            response = requests.post(
                url,
                json={
                    "username": self._settings.username,
                    "password": self._settings.password,
                },
                timeout=self._settings.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.error(f"WhatsApp sign-in request failed: {e}")
            raise UpstreamError(self.SERVICE, "Failed to authenticate with login API.") from e

        if not response.ok:
            logger.error(f"WhatsApp sign-in Error ({response.status_code}): {response.text}")
            raise UpstreamError(
                self.SERVICE,
                "Failed to authenticate with login API.",
                status_code=response.status_code,
            )

        try:
            token = (response.json().get("data") or {}).get("accessToken")
        except (ValueError, AttributeError):
            token = None

        if not token:
            logger.error("WhatsApp sign-in response carried no access token")
            raise UpstreamError(self.SERVICE, "Failed to authenticate with login API.")

        logger.info("Authenticated with WhatsApp gateway")
        return token

    def send_many(self, token: str, entries: Sequence[CampaignEntry]) -> None:
        self._require_config()

        url = f"{self._settings.api_url}{self._settings.send_many_path}"
        payload = {
            "data": [
                {"phoneNumber": entry.phone_number, "message": entry.message}
                for entry in entries
            ]
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

        try:
            response = requests.post(
                url,
                json=payload,
                headers=headers,
                timeout=self._settings.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.error(f"WhatsApp send-many request failed: {e}")
            raise UpstreamError(self.SERVICE, f"WhatsApp send failed: {e}") from e

        if not response.ok:
            logger.error(f"WhatsApp send-many Error ({response.status_code}): {response.text}")
            raise UpstreamError(
                self.SERVICE,
                f"WhatsApp send failed with status {response.status_code}",
                status_code=response.status_code,
            )

        logger.info(f"WhatsApp gateway accepted {len(entries)} messages")
