from .gemini_client import GeminiClient, TextGenerator

__all__ = ["GeminiClient", "TextGenerator"]
