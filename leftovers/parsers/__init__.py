"""Parsers package."""
from .base_parser import BaseRecipeParser
from .nutrition_parser import nutrition_warning, parse_nutrition
from .recipe_text_parser import RecipeTextParser, parse_recipe_text
from .section_extractor import extract, extract_block, extract_section, extract_value
from .segmenter import segment
from .substitution_parser import parse_substitution_suggestions
from .text_normalizer import clean_line, normalize

__all__ = [
    "BaseRecipeParser",
    "RecipeTextParser",
    "clean_line",
    "extract",
    "extract_block",
    "extract_section",
    "extract_value",
    "normalize",
    "nutrition_warning",
    "parse_nutrition",
    "parse_recipe_text",
    "parse_substitution_suggestions",
    "segment",
]
