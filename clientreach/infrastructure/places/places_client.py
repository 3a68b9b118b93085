"""
Google Places Client - Text Search
==================================

Searches Google Places (New) with a free-text query and returns the
place records untouched. Which attributes come back is controlled by the
field mask in PlacesSettings.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import PlacesSettings, get_settings
from ...domain.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class PlacesClient:
    """
    USAGE:
        client = PlacesClient()
        places = client.search_text("restaurant marketing agency")
    """

    SERVICE = "places"

    def __init__(self, settings: Optional[PlacesSettings] = None):
        settings = settings or get_settings().places
        self._api_key = settings.api_key
        self._search_url = settings.search_url
        self._field_mask = settings.field_mask
        self._timeout = settings.timeout_seconds

        if not self._api_key:
            logger.warning("No GOOGLE_PLACES_API_KEY set. Places search will fail.")

    def require_configured(self) -> None:
        """Raise ConfigurationError when the API key is missing."""
        if not self._api_key:
            raise ConfigurationError("API key for Google Places not configured.")

    def search_text(self, query: str) -> List[Dict[str, Any]]:
        """
        Run a text search.

        Returns:
            List of place records (empty when nothing matched).

        Raises:
            ConfigurationError: API key not configured.
            UpstreamError: Transport failure or non-success status.
        """
        self.require_configured()

        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self._api_key,
            "X-Goog-FieldMask": self._field_mask,
        }

        logger.info(f"Searching places for: {query}")
        try:
            response = requests.post(
                self._search_url,
                headers=headers,
                json={"textQuery": query},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Places API request failed: {e}")
            raise UpstreamError(self.SERVICE, f"Places API request failed: {e}") from e

        if not response.ok:
            logger.error(f"Places API Error ({response.status_code}): {response.text}")
            raise UpstreamError(
                self.SERVICE,
                f"Places API returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(self.SERVICE, "Places API returned invalid JSON") from e

        # An empty result comes back as {}
        places = data.get("places", []) if isinstance(data, dict) else []
        logger.info(f"Places API returned {len(places)} results")
        return places
