from .errors import ClientReachError, ConfigurationError, NoKeywordsError, UpstreamError
from .models import (
    CampaignEntry,
    CampaignReport,
    DeliveryStatus,
    MarketingStrategy,
    PotentialClients,
    ValidationVerdict,
)
from .parsing import extract_keywords, extract_messages, parse_verdict

__all__ = [
    "ClientReachError",
    "ConfigurationError",
    "NoKeywordsError",
    "UpstreamError",
    "CampaignEntry",
    "CampaignReport",
    "DeliveryStatus",
    "MarketingStrategy",
    "PotentialClients",
    "ValidationVerdict",
    "extract_keywords",
    "extract_messages",
    "parse_verdict",
]
