"""
Recipe Generation Service.

This module orchestrates recipe generation: it fetches the raw recipe text,
parses it, optionally fetches an image, and builds the display card scaled
to the desired number of servings.
"""
from __future__ import annotations

import logging

from ..generators.gemini_client import GeminiRecipeClient
from ..generators.image_client import ReplicateImageClient
from ..models.recipe import ParseResult, RecipeCard, RecipeOptions, SubstitutionSuggestion
from ..parsers.recipe_text_parser import RecipeTextParser
from ..parsers.substitution_parser import parse_substitution_suggestions
from .ingredient_formatter import scale_ingredients

_LOGGER = logging.getLogger(__name__)


def build_recipe_card(
    result: ParseResult,
    desired_servings: int | None = None,
    image_url: str | None = None
) -> RecipeCard:
    """Build the display card for a parsed recipe.

    Scaling is computed from the parsed (immutable) ingredient list on every
    call, so changing the desired servings never compounds.

    Args:
        result: The parse result
        desired_servings: Servings to scale to; defaults to the original count
        image_url: Optional image URL

    Returns:
        The recipe card
    """
    recipe = result.recipe
    original_servings = result.derived.original_servings
    desired = desired_servings or original_servings

    ingredients = scale_ingredients(
        recipe.ingredients, original_servings, desired)

    return RecipeCard(
        title=recipe.title,
        ingredients=ingredients,
        instructions=list(recipe.instructions),
        substitutions=list(recipe.substitutions) if recipe.substitutions is not None else None,
        tips=list(recipe.tips) if recipe.tips is not None else None,
        nutrition=result.display,
        original_servings=original_servings,
        desired_servings=desired,
        image_url=image_url,
        warning=result.warning,
    )


def generate_recipe(
    ingredients: str,
    options: RecipeOptions | None,
    api_key: str,
    model: str,
    image_token: str | None = None,
    desired_servings: int | None = None
) -> RecipeCard:
    """Generate, parse and render a recipe for leftover ingredients.

    This function orchestrates the generation process:
    1. Asks the text model for a recipe
    2. Parses the raw text into a structured recipe
    3. Optionally generates an image (failures only drop the image)
    4. Builds the card scaled to the desired servings

    Args:
        ingredients: Comma separated ingredients
        options: User preferences
        api_key: Gemini API key
        model: Gemini model name
        image_token: Replicate API token; no image is generated without it
        desired_servings: Servings to scale ingredients to

    Returns:
        The recipe card

    Raises:
        Exception: Re-raises generation errors for the caller to report
    """
    _LOGGER.debug("Starting recipe generation for '%s' using model %s",
                  ingredients, model)

    try:
        client = GeminiRecipeClient(api_key=api_key, model=model)
        recipe_text = client.generate_recipe(ingredients, options)
    except Exception as e:
        _LOGGER.error("Error generating recipe for '%s': %s",
                      ingredients, str(e), exc_info=True)
        raise

    result = RecipeTextParser().parse(recipe_text)
    if result.warning:
        _LOGGER.warning("%s (recipe: '%s')", result.warning, result.recipe.title)

    image_url = None
    if image_token:
        image_url = ReplicateImageClient(image_token).generate_image(result.recipe.title)

    _LOGGER.info("Generated recipe '%s' with %d ingredients",
                 result.recipe.title, len(result.recipe.ingredients))

    return build_recipe_card(result, desired_servings, image_url)


def suggest_substitutions(
    ingredients: list[str],
    options: RecipeOptions | None,
    api_key: str,
    model: str
) -> list[SubstitutionSuggestion]:
    """Ask for substitutions of some ingredients and parse the answer.

    Args:
        ingredients: Ingredients to replace, e.g. ['butter', 'milk']
        options: User preferences (the cuisine guides the suggestions)
        api_key: Gemini API key
        model: Gemini model name

    Returns:
        One suggestion group per ingredient the model answered for
    """
    _LOGGER.debug("Requesting substitutions for %s using model %s",
                  ingredients, model)

    try:
        client = GeminiRecipeClient(api_key=api_key, model=model)
        text = client.generate_substitutions(ingredients, options)
    except Exception as e:
        _LOGGER.error("Error generating substitutions for %s: %s",
                      ingredients, str(e), exc_info=True)
        raise

    suggestions = parse_substitution_suggestions(text)
    if not suggestions:
        _LOGGER.warning("No substitutions could be parsed for %s", ingredients)
    return suggestions
