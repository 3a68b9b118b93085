from .messaging_provider import GatewayProvider, MessagingProvider

__all__ = ["GatewayProvider", "MessagingProvider"]
