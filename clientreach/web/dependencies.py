"""Request-scoped access to the services built by create_app()."""

from fastapi import Request

from ..application import MarketingWorkflow
from ..infrastructure.persistence import Database


def get_workflow(request: Request) -> MarketingWorkflow:
    return request.app.state.workflow


def get_database(request: Request) -> Database:
    return request.app.state.db
