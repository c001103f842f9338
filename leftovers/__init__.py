"""
leftovers - turn AI-generated recipes into structured data.

The package parses the free-form recipe text returned by a text generation
model into a structured recipe, derives display values such as total time,
serving size and a calorie estimate, and scales ingredient quantities to a
desired number of servings.
"""
from __future__ import annotations

from .models.recipe import ParsedRecipe, ParseResult, RecipeCard, RecipeOptions
from .parsers.recipe_text_parser import RecipeTextParser, parse_recipe_text
from .services.ingredient_formatter import scale_ingredients, scale_line
from .services.recipe_service import build_recipe_card, generate_recipe

__all__ = [
    "ParsedRecipe",
    "ParseResult",
    "RecipeCard",
    "RecipeOptions",
    "RecipeTextParser",
    "build_recipe_card",
    "generate_recipe",
    "parse_recipe_text",
    "scale_ingredients",
    "scale_line",
]
