"""
Parser interface for generated recipe text.

A parser reads the free-form text a model returned and never raises on
malformed input: sections it cannot find are reported as empty or None.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from ..models.recipe import ParsedRecipe, ParseResult


class BaseRecipeParser(ABC):
    """Interface shared by parsers of model-generated recipes.

    ``parse_recipe`` yields only the frozen recipe sections, while ``parse``
    adds nutrition, derived display values and the incomplete-nutrition
    warning on top of them.
    """

    @abstractmethod
    def parse_recipe(self, text: str | None) -> ParsedRecipe:
        """Split generated text into title, ingredients, steps and the other sections."""

    @abstractmethod
    def parse(self, text: str | None) -> ParseResult:
        """Parse generated text into the recipe plus everything derived from it."""
