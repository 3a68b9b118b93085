from .places_client import PlacesClient

__all__ = ["PlacesClient"]
