"""Tests for the Gemini, Places and WhatsApp gateway clients (requests mocked)."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from clientreach.domain.errors import ConfigurationError, UpstreamError
from clientreach.domain.models import CampaignEntry
from clientreach.infrastructure.config import GeminiSettings, PlacesSettings, WhatsAppSettings
from clientreach.infrastructure.llm import GeminiClient
from clientreach.infrastructure.places import PlacesClient
from clientreach.infrastructure.whatsapp import GatewayProvider

GEMINI_POST = "clientreach.infrastructure.llm.gemini_client.requests.post"
PLACES_POST = "clientreach.infrastructure.places.places_client.requests.post"
GATEWAY_POST = "clientreach.infrastructure.whatsapp.messaging_provider.requests.post"


def make_response(status_code=200, json_data=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = json_data if json_data is not None else {}
    response.text = text
    return response


# ── Gemini ─────────────────────────────────────────────────────

class TestGeminiClient:

    @pytest.fixture
    def gemini(self, settings):
        return GeminiClient(settings.gemini)

    def test_returns_joined_candidate_text(self, gemini):
        body = {"candidates": [{"content": {"parts": [{"text": "dentists\n"}, {"text": "clinics"}]}}]}
        with patch(GEMINI_POST, return_value=make_response(json_data=body)) as post:
            assert gemini.generate("prompt") == "dentists\nclinics"

        kwargs = post.call_args.kwargs
        assert post.call_args.args[0].endswith("/models/gemini-2.0-flash:generateContent")
        assert kwargs["params"] == {"key": "gemini-test-key"}
        assert kwargs["json"]["contents"][0]["role"] == "user"
        assert kwargs["json"]["contents"][0]["parts"][0]["text"] == "prompt"
        assert kwargs["timeout"] == 5

    def test_missing_key_raises_before_request(self):
        gemini = GeminiClient(GeminiSettings(api_key=""))
        with patch(GEMINI_POST) as post:
            with pytest.raises(ConfigurationError, match="Google AI"):
                gemini.generate("prompt")
        post.assert_not_called()

    def test_non_success_status(self, gemini):
        with patch(GEMINI_POST, return_value=make_response(429, text="quota")):
            with pytest.raises(UpstreamError) as exc_info:
                gemini.generate("prompt")
        assert exc_info.value.service == "gemini"
        assert exc_info.value.status_code == 429

    def test_transport_error(self, gemini):
        with patch(GEMINI_POST, side_effect=requests.ConnectionError("down")):
            with pytest.raises(UpstreamError):
                gemini.generate("prompt")

    def test_timeout(self, gemini):
        with patch(GEMINI_POST, side_effect=requests.Timeout()):
            with pytest.raises(UpstreamError, match="timed out"):
                gemini.generate("prompt")

    def test_no_candidates_is_upstream_error(self, gemini):
        with patch(GEMINI_POST, return_value=make_response(json_data={"promptFeedback": {}})):
            with pytest.raises(UpstreamError):
                gemini.generate("prompt")

    def test_empty_text_is_returned_as_is(self, gemini):
        body = {"candidates": [{"content": {"parts": [{"text": ""}]}}]}
        with patch(GEMINI_POST, return_value=make_response(json_data=body)):
            assert gemini.generate("prompt") == ""


# ── Places ─────────────────────────────────────────────────────

class TestPlacesClient:

    @pytest.fixture
    def places(self, settings):
        return PlacesClient(settings.places)

    def test_search_sends_field_mask_and_returns_places(self, places, restaurant_places):
        with patch(PLACES_POST, return_value=make_response(json_data={"places": restaurant_places})) as post:
            assert places.search_text("restaurant web designer") == restaurant_places

        headers = post.call_args.kwargs["headers"]
        assert headers["X-Goog-Api-Key"] == "places-test-key"
        assert headers["X-Goog-FieldMask"] == (
            "places.displayName,places.formattedAddress,places.priceLevel,"
            "places.internationalPhoneNumber,places.userRatingCount"
        )
        assert post.call_args.kwargs["json"] == {"textQuery": "restaurant web designer"}

    def test_empty_result(self, places):
        with patch(PLACES_POST, return_value=make_response(json_data={})):
            assert places.search_text("nothing") == []

    def test_missing_key_raises_before_request(self):
        places = PlacesClient(PlacesSettings(api_key=""))
        with patch(PLACES_POST) as post:
            with pytest.raises(ConfigurationError, match="Google Places"):
                places.search_text("cafes")
        post.assert_not_called()

    def test_non_success_status_is_echoed(self, places):
        with patch(PLACES_POST, return_value=make_response(403, text="PERMISSION_DENIED")):
            with pytest.raises(UpstreamError) as exc_info:
                places.search_text("cafes")
        assert exc_info.value.service == "places"
        assert exc_info.value.status_code == 403

    def test_transport_error_has_no_status(self, places):
        with patch(PLACES_POST, side_effect=requests.ConnectionError("down")):
            with pytest.raises(UpstreamError) as exc_info:
                places.search_text("cafes")
        assert exc_info.value.status_code is None


# ── WhatsApp gateway ───────────────────────────────────────────

class TestGatewayProvider:

    @pytest.fixture
    def gateway(self, settings):
        return GatewayProvider(settings.whatsapp)

    def test_authenticate_signs_in(self, gateway):
        body = {"data": {"accessToken": "jwt-abc"}}
        with patch(GATEWAY_POST, return_value=make_response(201, json_data=body)) as post:
            assert gateway.authenticate() == "jwt-abc"

        assert post.call_args.args[0] == "http://gateway.test/api/auth/sign-in"
        assert post.call_args.kwargs["json"] == {"username": "admin", "password": "secret"}

    def test_configured_token_skips_sign_in(self):
        gateway = GatewayProvider(WhatsAppSettings(api_url="http://gateway.test", access_token="preissued"))
        with patch(GATEWAY_POST) as post:
            assert gateway.authenticate() == "preissued"
        post.assert_not_called()

    def test_missing_credentials_raise_before_request(self):
        gateway = GatewayProvider(
            WhatsAppSettings(api_url="http://gateway.test", username="", password="", access_token="")
        )
        with patch(GATEWAY_POST) as post:
            with pytest.raises(ConfigurationError):
                gateway.authenticate()
        post.assert_not_called()

    def test_missing_url_raises(self):
        gateway = GatewayProvider(WhatsAppSettings(api_url="", access_token="preissued"))
        with pytest.raises(ConfigurationError, match="URL"):
            gateway.authenticate()

    def test_rejected_sign_in(self, gateway):
        with patch(GATEWAY_POST, return_value=make_response(401, text="bad creds")):
            with pytest.raises(UpstreamError) as exc_info:
                gateway.authenticate()
        assert exc_info.value.status_code == 401

    def test_sign_in_without_token(self, gateway):
        with patch(GATEWAY_POST, return_value=make_response(201, json_data={"data": {}})):
            with pytest.raises(UpstreamError):
                gateway.authenticate()

    def test_send_many_posts_whole_batch_with_bearer(self, gateway):
        entries = [CampaignEntry("+1234567890", "Hello"), CampaignEntry("+1987654321", "Hi")]
        with patch(GATEWAY_POST, return_value=make_response(201)) as post:
            gateway.send_many("jwt-abc", entries)

        post.assert_called_once()
        assert post.call_args.args[0] == "http://gateway.test/api/whatsapp-web/send-many-message"
        assert post.call_args.kwargs["headers"]["Authorization"] == "Bearer jwt-abc"
        assert post.call_args.kwargs["json"] == {
            "data": [
                {"phoneNumber": "+1234567890", "message": "Hello"},
                {"phoneNumber": "+1987654321", "message": "Hi"},
            ]
        }

    def test_send_many_failure(self, gateway):
        with patch(GATEWAY_POST, return_value=make_response(500, text="oops")):
            with pytest.raises(UpstreamError) as exc_info:
                gateway.send_many("jwt-abc", [CampaignEntry("1", "x")])
        assert exc_info.value.status_code == 500
