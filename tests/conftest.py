"""
Shared fixtures.

External services are replaced by MagicMock objects; no test makes a
network call.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from clientreach.application import MarketingWorkflow
from clientreach.infrastructure.config import (
    GeminiSettings,
    PlacesSettings,
    ServerSettings,
    Settings,
    WhatsAppSettings,
)
from clientreach.infrastructure.llm import TextGenerator
from clientreach.infrastructure.persistence import Database
from clientreach.infrastructure.places import PlacesClient
from clientreach.infrastructure.whatsapp import MessagingProvider
from clientreach.web import create_app

RESTAURANT_PLACES = [
    {
        "displayName": {"text": "Bistro Web Co", "languageCode": "en"},
        "formattedAddress": "1 Main St, Springfield",
        "internationalPhoneNumber": "+1 555-0100",
        "userRatingCount": 42,
    },
    {
        "displayName": {"text": "Menu Marketing", "languageCode": "en"},
        "formattedAddress": "9 Elm Ave, Springfield",
        "priceLevel": "PRICE_LEVEL_MODERATE",
        "userRatingCount": 7,
    },
]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        gemini=GeminiSettings(api_key="gemini-test-key", model="gemini-2.0-flash", timeout_seconds=5),
        places=PlacesSettings(api_key="places-test-key", timeout_seconds=5),
        whatsapp=WhatsAppSettings(
            api_url="http://gateway.test",
            username="admin",
            password="secret",
            access_token="",
            timeout_seconds=5,
        ),
        server=ServerSettings(host="127.0.0.1", port=8000, cors_origins=("*",)),
        database_file=tmp_path / "test.db",
    )


@pytest.fixture
def text_generator():
    return MagicMock(spec=TextGenerator)


@pytest.fixture
def places_client():
    client = MagicMock(spec=PlacesClient)
    client.search_text.return_value = RESTAURANT_PLACES
    return client


@pytest.fixture
def messaging_provider():
    provider = MagicMock(spec=MessagingProvider)
    provider.authenticate.return_value = "token-123"
    return provider


@pytest.fixture
def workflow(text_generator, places_client, messaging_provider) -> MarketingWorkflow:
    return MarketingWorkflow(text_generator, places_client, messaging_provider)


@pytest.fixture
def database(settings) -> Database:
    db = Database(settings.database_file)
    db.init()
    return db


@pytest.fixture
def client(settings, workflow, database):
    app = create_app(settings=settings, workflow=workflow, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def restaurant_places():
    return RESTAURANT_PLACES
