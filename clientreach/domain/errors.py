"""
Error taxonomy shared by infrastructure clients, workflows and routes.

A validation suggestion is NOT an error; see ValidationVerdict.
"""

from typing import Optional


class ClientReachError(Exception):
    """Base exception for ClientReach errors."""
    pass


class ConfigurationError(ClientReachError):
    """A required API key or credential is missing. Raised before any request."""
    pass


class UpstreamError(ClientReachError):
    """
    An external API call failed (network, non-success status, malformed body).

    Attributes:
        service: Short provider name ("gemini", "places", "whatsapp").
        status_code: Upstream HTTP status, when the provider answered.
    """

    def __init__(self, service: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.service = service
        self.status_code = status_code


class NoKeywordsError(ClientReachError):
    """The AI response contained no usable search keywords."""
    pass
