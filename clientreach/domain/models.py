"""
Request-scoped value types. Nothing here is persisted.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class CampaignEntry:
    """A single (recipient, message) pair of a campaign batch."""
    phone_number: str
    message: str


@dataclass(frozen=True)
class DeliveryStatus:
    """Delivery outcome for one recipient. Success is batch-granular."""
    phone_number: str
    status: str = "sent"


@dataclass(frozen=True)
class ValidationVerdict:
    """
    Outcome of business description validation.

    Either accepted, or carrying exactly one suggestion. Never both.
    """
    accepted: bool
    suggestion: Optional[str] = None

    @classmethod
    def accept(cls) -> "ValidationVerdict":
        return cls(accepted=True)

    @classmethod
    def suggest(cls, suggestion: str) -> "ValidationVerdict":
        return cls(accepted=False, suggestion=suggestion)


@dataclass
class PotentialClients:
    keywords: List[str]
    places: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class MarketingStrategy:
    messages: List[str]
    response_text: str


@dataclass
class CampaignReport:
    details: List[DeliveryStatus]
    status: str = "ok"
