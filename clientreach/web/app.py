"""
FastAPI Web Application - ClientReach API
=========================================

JSON API for AI-assisted client discovery and WhatsApp campaigns.

The app is assembled by create_app(); nothing is wired at import time.
Serve it with:
    uvicorn clientreach.web.app:create_app --factory
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..application import MarketingWorkflow
from ..infrastructure.config import Settings, get_settings
from ..infrastructure.llm import GeminiClient
from ..infrastructure.persistence import Database
from ..infrastructure.places import PlacesClient
from ..infrastructure.whatsapp import GatewayProvider
from . import ai_routes, task_routes

logger = logging.getLogger(__name__)


def build_workflow(settings: Settings) -> MarketingWorkflow:
    """Wire the production clients from settings."""
    return MarketingWorkflow(
        text_generator=GeminiClient(settings.gemini),
        places_client=PlacesClient(settings.places),
        messaging_provider=GatewayProvider(settings.whatsapp),
    )


# ── Lifespan ───────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    for issue in app.state.settings.validate():
        logger.warning(issue)
    app.state.db.init()
    logger.info("Database ready")
    yield


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body/query validation failures as 400 with a readable message."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return JSONResponse(status_code=400, content={"error": "; ".join(problems) or "Invalid request"})


def create_app(
    settings: Optional[Settings] = None,
    workflow: Optional[MarketingWorkflow] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Defaults to get_settings().
        workflow: Defaults to the Gemini/Places/WhatsApp gateway clients.
        database: Defaults to the SQLite file from settings.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="ClientReach",
        description="AI-assisted client discovery and WhatsApp campaigns",
        docs_url="/",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.workflow = workflow or build_workflow(settings)
    app.state.db = database or Database(settings.database_file)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(task_routes.router)
    app.include_router(ai_routes.router)

    return app
