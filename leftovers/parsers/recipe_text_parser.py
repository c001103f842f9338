"""
Recipe Text Parser.

This module turns the free-form recipe returned by the text generation model
into a ParsedRecipe, then layers the nutrition facts, derived fields and the
incomplete-nutrition warning on top of it.
"""
from __future__ import annotations

import logging

from ..const import UNTITLED_RECIPE
from ..models.recipe import (
    NutritionBlock,
    ParsedRecipe,
    ParseResult,
    SectionBoundaries,
    SectionKind,
    SectionStrategy,
    TimeFields,
)
from ..services.derived_fields import build_nutrition_display, derive_fields
from .base_parser import BaseRecipeParser
from .nutrition_parser import nutrition_warning, parse_nutrition
from .section_extractor import extract_block, extract_section, extract_value
from .segmenter import segment

_LOGGER = logging.getLogger(__name__)


class RecipeTextParser(BaseRecipeParser):
    """Parses free-form generated recipe text into structured records.

    The parser is stateless: every call segments the text from scratch, so
    a superseded parse can simply be discarded.
    """

    def _extract_sections(self, boundaries: SectionBoundaries) -> dict[SectionKind, object]:
        """Run the extraction strategy of every section kind."""
        sections: dict[SectionKind, object] = {}
        for kind in SectionKind:
            if kind.strategy is SectionStrategy.LIST:
                entries = extract_section(boundaries, kind)
                sections[kind] = tuple(entries) if entries is not None else None
            elif kind.strategy is SectionStrategy.BLOCK:
                sections[kind] = extract_block(boundaries, kind)
            else:
                sections[kind] = extract_value(boundaries, kind)
        return sections

    def parse_recipe(self, text: str | None) -> ParsedRecipe:
        """Parse recipe information from generated text.

        Args:
            text: The raw recipe text

        Returns:
            A ParsedRecipe; sections that were not found are empty or None
        """
        return self._build_recipe(segment(text))

    def _build_recipe(self, boundaries: SectionBoundaries) -> ParsedRecipe:
        sections = self._extract_sections(boundaries)

        recipe = ParsedRecipe(
            title=boundaries.title or UNTITLED_RECIPE,
            ingredients=sections[SectionKind.INGREDIENTS] or (),
            instructions=sections[SectionKind.INSTRUCTIONS] or (),
            substitutions=sections[SectionKind.SUBSTITUTIONS],
            tips=sections[SectionKind.TIPS],
            nutrition=sections[SectionKind.NUTRITION],
            servings=sections[SectionKind.SERVES],
            serving_size=sections[SectionKind.SERVING_SIZE],
            total_time=sections[SectionKind.TOTAL_TIME],
        )

        _LOGGER.info(
            "Parsed recipe '%s' with %d ingredients and %d instructions",
            recipe.title, len(recipe.ingredients), len(recipe.instructions))

        if not recipe.ingredients:
            _LOGGER.warning("No ingredients found in recipe '%s'", recipe.title)

        return recipe

    def _parse_nutrition_block(self, boundaries: SectionBoundaries, recipe: ParsedRecipe) -> NutritionBlock:
        """Parse the nutrition block, filling time fields from the total time section."""
        block = parse_nutrition(recipe.nutrition)

        time_lines = extract_section(boundaries, SectionKind.TOTAL_TIME)
        if not time_lines:
            return block

        section_times = parse_nutrition(time_lines).times
        times = TimeFields(
            prep=block.times.prep or section_times.prep,
            cook=block.times.cook or section_times.cook,
            total=block.times.total or section_times.total,
        )
        return NutritionBlock(facts=block.facts, times=times)

    def parse(self, text: str | None) -> ParseResult:
        """Parse a recipe and compute its derived view.

        Args:
            text: The raw recipe text

        Returns:
            The parsed recipe, nutrition, derived fields, display labels and
            an optional incomplete-nutrition warning
        """
        boundaries = segment(text)
        recipe = self._build_recipe(boundaries)
        block = self._parse_nutrition_block(boundaries, recipe)
        derived = derive_fields(recipe, block)
        display = build_nutrition_display(block, derived)
        warning = nutrition_warning(text, block.facts, derived.calories_estimated)

        return ParseResult(
            recipe=recipe,
            nutrition=block,
            derived=derived,
            display=display,
            warning=warning,
        )


def parse_recipe_text(text: str | None) -> ParseResult:
    """Parse generated recipe text with a fresh RecipeTextParser."""
    return RecipeTextParser().parse(text)
