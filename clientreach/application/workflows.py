"""
Marketing Workflows - Orchestration of External Calls
=====================================================

Each workflow is strictly sequential and attempts every external call
exactly once. Errors raised by the clients (ConfigurationError,
UpstreamError) propagate unchanged; the web layer maps them to responses.

USAGE:
    workflow = MarketingWorkflow(GeminiClient(), PlacesClient(), GatewayProvider())
    result = workflow.generate_potential_clients("We build websites for restaurants.")
"""

import logging
from typing import Sequence

from . import prompts
from ..domain.errors import NoKeywordsError
from ..domain.models import (
    CampaignEntry,
    CampaignReport,
    DeliveryStatus,
    MarketingStrategy,
    PotentialClients,
    ValidationVerdict,
)
from ..domain.parsing import extract_keywords, extract_messages, parse_verdict
from ..infrastructure.llm import TextGenerator
from ..infrastructure.places import PlacesClient
from ..infrastructure.whatsapp import MessagingProvider

logger = logging.getLogger(__name__)


class MarketingWorkflow:
    """Sequences the AI, places and messaging clients for each endpoint."""

    def __init__(
        self,
        text_generator: TextGenerator,
        places_client: PlacesClient,
        messaging_provider: MessagingProvider,
    ):
        self._text_generator = text_generator
        self._places_client = places_client
        self._messaging_provider = messaging_provider

    def generate_potential_clients(self, business_description: str) -> PotentialClients:
        """
        Description -> AI keywords -> places search for the first keyword.

        Raises:
            ConfigurationError: Places key missing; raised before the AI call.
            NoKeywordsError: The AI response had no non-blank line.
        """
        self._places_client.require_configured()

        text = self._text_generator.generate(prompts.keywords_prompt(business_description))

        keywords = extract_keywords(text)
        if not keywords:
            logger.warning("AI response contained no keywords")
            raise NoKeywordsError("AI did not generate any valid keywords.")

        logger.info(f"Generated {len(keywords)} keywords, searching for '{keywords[0]}'")
        places = self._places_client.search_text(keywords[0])

        return PotentialClients(keywords=keywords, places=places)

    def validate_business_description(self, business_description: str) -> ValidationVerdict:
        text = self._text_generator.generate(prompts.validation_prompt(business_description))
        verdict = parse_verdict(text)
        logger.info(f"Business description {'accepted' if verdict.accepted else 'needs improvement'}")
        return verdict

    def generate_marketing_strategy(self, business_description: str) -> MarketingStrategy:
        text = self._text_generator.generate(prompts.strategy_prompt(business_description))
        response_text = text.strip()
        messages = extract_messages(response_text)
        if not messages:
            logger.warning("AI response contained no 'Message N:' labels")
        return MarketingStrategy(messages=messages, response_text=response_text)

    def send_campaign(self, entries: Sequence[CampaignEntry]) -> CampaignReport:
        """
        Authenticate, then dispatch the whole batch in one call.

        Every entry is reported as sent once the batch call succeeds.
        """
        token = self._messaging_provider.authenticate()
        self._messaging_provider.send_many(token, entries)

        logger.info(f"Campaign dispatched to {len(entries)} recipients")
        return CampaignReport(
            details=[DeliveryStatus(phone_number=entry.phone_number) for entry in entries]
        )
