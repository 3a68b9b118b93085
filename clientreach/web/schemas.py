"""
Request/response bodies for the HTTP API.

Field names follow the JSON contract of the frontend (camelCase).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class BusinessDescriptionRequest(BaseModel):
    businessDescription: str = Field(
        ...,
        min_length=1,
        description="A description of the user's business.",
        examples=["We build custom websites for local restaurants."],
    )


class ErrorResponse(BaseModel):
    error: str


# ── AI endpoints ───────────────────────────────────────────────

class PotentialClientsResponse(BaseModel):
    places: List[Dict[str, Any]]
    keywords: List[str]


class ValidationSuccessResponse(BaseModel):
    status: str = Field("ok", examples=["ok"])


class ValidationSuggestionResponse(BaseModel):
    suggestion: str = Field(
        ...,
        examples=["Consider highlighting your unique design process or speed of delivery."],
    )


class MarketingStrategyResponse(BaseModel):
    messages: List[str]
    responseText: str


# ── Campaign ───────────────────────────────────────────────────

class CampaignEntrySchema(BaseModel):
    phoneNumber: str = Field(..., min_length=1, description="Recipient's phone number.", examples=["+1234567890"])
    message: str = Field(..., min_length=1, description="Message to send.", examples=["Hello, this is a test message."])


class SendCampaignRequest(BaseModel):
    data: List[CampaignEntrySchema] = Field(..., min_length=1)


class DeliveryStatusSchema(BaseModel):
    phoneNumber: str
    status: str


class SendCampaignResponse(BaseModel):
    status: str
    details: List[DeliveryStatusSchema]


# ── Tasks ──────────────────────────────────────────────────────

class TaskCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["lorem"])
    slug: str = Field(..., min_length=1, examples=["lorem-ipsum"])
    description: Optional[str] = None
    completed: bool = False
    due_date: datetime


class TaskSchema(BaseModel):
    id: int
    name: str
    slug: str
    description: str = ""
    completed: bool = False
    due_date: str


class TaskResponse(BaseModel):
    success: bool
    task: TaskSchema


class TaskListResponse(BaseModel):
    success: bool
    tasks: List[TaskSchema]
