"""Generators package."""
from .gemini_client import GeminiRecipeClient
from .image_client import ReplicateImageClient

__all__ = ["GeminiRecipeClient", "ReplicateImageClient"]
