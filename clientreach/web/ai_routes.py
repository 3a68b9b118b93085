"""
AI Routes - Potential Clients, Validation, Strategy, Campaign
=============================================================

Every route catches workflow errors and converts them to a JSON body with
an "error" field. Upstream details are logged, never returned.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..application import MarketingWorkflow
from ..domain.errors import ConfigurationError, NoKeywordsError, UpstreamError
from ..domain.models import CampaignEntry
from ..infrastructure.places import PlacesClient
from .dependencies import get_workflow
from .schemas import (
    BusinessDescriptionRequest,
    ErrorResponse,
    MarketingStrategyResponse,
    PotentialClientsResponse,
    SendCampaignRequest,
    SendCampaignResponse,
    ValidationSuccessResponse,
    ValidationSuggestionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Internal Server Error"}}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ── Potential clients ──────────────────────────────────────────

@router.post(
    "/generate-potential-clients",
    tags=["AI", "Places"],
    summary="Generate client keywords & find Google Places results for the first keyword",
    response_model=PotentialClientsResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "No valid keywords generated by AI"}},
)
def generate_potential_clients(
    body: BusinessDescriptionRequest,
    workflow: MarketingWorkflow = Depends(get_workflow),
):
    try:
        result = workflow.generate_potential_clients(body.businessDescription)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return _error(500, str(e))
    except NoKeywordsError as e:
        return _error(404, str(e))
    except UpstreamError as e:
        logger.error(f"Upstream {e.service} failure: {e}")
        if e.service != PlacesClient.SERVICE:
            return _error(500, "Failed to generate keywords from AI model.")
        if e.status_code is not None:
            return _error(500, f"Failed to fetch data from Google Places API. Status: {e.status_code}")
        return _error(500, "Failed to process request to Google Places API.")
    except Exception as e:
        logger.exception(f"Unexpected error generating potential clients: {e}")
        return _error(500, "Internal Server Error")

    return {"places": result.places, "keywords": result.keywords}


# ── Validation ─────────────────────────────────────────────────

@router.post(
    "/validate-business-description",
    tags=["AI", "Validation"],
    summary="Validate a business description for marketing readiness using AI",
    response_model=ValidationSuccessResponse,
    responses={
        **ERROR_RESPONSES,
        400: {"model": ValidationSuggestionResponse, "description": "Business description needs improvement; suggestion provided."},
    },
)
def validate_business_description(
    body: BusinessDescriptionRequest,
    workflow: MarketingWorkflow = Depends(get_workflow),
):
    try:
        verdict = workflow.validate_business_description(body.businessDescription)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return _error(500, str(e))
    except Exception as e:
        logger.exception(f"Error calling Gemini API for validation: {e}")
        return _error(500, "Failed to validate business description using AI model.")

    if verdict.accepted:
        return {"status": "ok"}
    return JSONResponse(status_code=400, content={"suggestion": verdict.suggestion})


# ── Marketing strategy ─────────────────────────────────────────

@router.post(
    "/generate-marketing-strategy",
    tags=["AI", "Strategy"],
    summary="Generate a 7-message WhatsApp marketing sequence using AI",
    response_model=MarketingStrategyResponse,
    responses=ERROR_RESPONSES,
)
def generate_marketing_strategy(
    body: BusinessDescriptionRequest,
    workflow: MarketingWorkflow = Depends(get_workflow),
):
    try:
        strategy = workflow.generate_marketing_strategy(body.businessDescription)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return _error(500, str(e))
    except Exception as e:
        logger.exception(f"Error calling Gemini API for marketing strategy: {e}")
        return _error(500, "Failed to generate marketing strategy using AI model.")

    return {"messages": strategy.messages, "responseText": strategy.response_text}


# ── Campaign ───────────────────────────────────────────────────

@router.post(
    "/send-campaign",
    tags=["Campaign"],
    summary="Send a marketing campaign via WhatsApp",
    response_model=SendCampaignResponse,
    responses=ERROR_RESPONSES,
)
def send_campaign(
    body: SendCampaignRequest,
    workflow: MarketingWorkflow = Depends(get_workflow),
):
    entries = [CampaignEntry(phone_number=e.phoneNumber, message=e.message) for e in body.data]

    try:
        report = workflow.send_campaign(entries)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return _error(500, str(e))
    except UpstreamError as e:
        logger.error(f"Campaign dispatch failed: {e}")
        return _error(500, "Failed to send campaign via WhatsApp API.")
    except Exception as e:
        logger.exception(f"Unexpected error sending campaign: {e}")
        return _error(500, "Internal Server Error")

    return {
        "status": report.status,
        "details": [{"phoneNumber": d.phone_number, "status": d.status} for d in report.details],
    }
