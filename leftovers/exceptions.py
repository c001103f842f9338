"""Exceptions raised by the leftovers generators and services."""
from __future__ import annotations


class LeftoversError(Exception):
    """Base class for all leftovers errors."""


class RecipeGenerationError(LeftoversError):
    """The text generation call failed or returned an unusable response."""


class RateLimitError(RecipeGenerationError):
    """The text generation API is rate limiting requests."""
