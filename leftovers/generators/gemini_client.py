"""
Gemini text generation client.

This module asks a Gemini model for a recipe (or substitution ideas) built
from leftover ingredients and returns the raw, unparsed text.
"""
from __future__ import annotations

import logging

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from ..const import DEFAULT_MODEL, RATE_LIMIT_MESSAGE
from ..exceptions import RateLimitError, RecipeGenerationError
from ..models.recipe import RecipeOptions
from .prompts import build_recipe_prompt, build_substitution_prompt

_LOGGER = logging.getLogger(__name__)


class GeminiRecipeClient:
    """Generates raw recipe text using a Gemini model."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL) -> None:
        """Initialize the Gemini client.

        Args:
            api_key: API key for the Gemini API
            model: The model to use for generation

        Raises:
            ValueError: If API key is empty
        """
        if not api_key or not api_key.strip():
            raise ValueError("Gemini API key cannot be empty")

        self.model = model
        genai.configure(api_key=api_key)
        self._model = genai.GenerativeModel(model)
        _LOGGER.debug("Initialized GeminiRecipeClient with model %s", model)

    def _generate(self, prompt: str) -> str:
        """Send a prompt and return the text of the first candidate.

        Raises:
            RateLimitError: If the API is rate limiting requests
            RecipeGenerationError: If the call fails or the response is empty
        """
        _LOGGER.debug("Calling Gemini model %s with %d character prompt",
                      self.model, len(prompt))
        try:
            response = self._model.generate_content(prompt)
        except google_exceptions.ResourceExhausted as e:
            _LOGGER.error("Gemini API rate limit reached: %s", str(e))
            raise RateLimitError(RATE_LIMIT_MESSAGE) from e
        except google_exceptions.GoogleAPIError as e:
            if "rate limit" in str(e).lower():
                _LOGGER.error("Gemini API rate limit reached: %s", str(e))
                raise RateLimitError(RATE_LIMIT_MESSAGE) from e
            _LOGGER.error("Error calling Gemini API: %s", str(e), exc_info=True)
            raise RecipeGenerationError(f"Gemini API error: {e}") from e

        try:
            text = response.text
        except (ValueError, AttributeError, IndexError) as e:
            _LOGGER.error("Invalid response format from Gemini API: %s", str(e))
            raise RecipeGenerationError(
                "Invalid response format from Gemini API") from e

        if not text or not text.strip():
            raise RecipeGenerationError("Gemini API returned an empty response")

        _LOGGER.info("Received %d characters from Gemini", len(text))
        return text

    def generate_recipe(self, ingredients: str, options: RecipeOptions | None = None) -> str:
        """Generate a recipe for the given leftover ingredients.

        Args:
            ingredients: Comma separated ingredients, e.g. 'rice, onion'
            options: User preferences; defaults are used when omitted

        Returns:
            The raw recipe text

        Raises:
            ValueError: If no ingredients are given
        """
        if not ingredients or not ingredients.strip():
            raise ValueError("No ingredients given")

        prompt = build_recipe_prompt(ingredients.strip(), options or RecipeOptions())
        return self._generate(prompt)

    def generate_substitutions(self, ingredients: list[str], options: RecipeOptions | None = None) -> str:
        """Ask for substitutions of the given ingredients.

        Returns:
            The raw suggestion text, see parse_substitution_suggestions
        """
        ingredients = [ingredient.strip() for ingredient in ingredients if ingredient.strip()]
        if not ingredients:
            raise ValueError("No ingredients given")

        prompt = build_substitution_prompt(ingredients, options or RecipeOptions())
        return self._generate(prompt)
