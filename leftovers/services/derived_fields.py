"""
Derived-Field Calculator.

This module computes display values on top of a parsed recipe: total time
from prep and cook time, a serving-size sentence, and a calorie estimate
from a fixed ingredient table when the model omitted calories.
Nothing here mutates the parsed recipe.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable

from ..const import (
    CALORIE_TABLE,
    GOAT_CHEESE_GRAMS_PER_UNIT,
    SERVING_SIZE_NOT_SPECIFIED,
    TOTAL_TIME_ARTIFACT,
    UNKNOWN_VALUE,
)
from ..models.recipe import (
    DerivedFields,
    NutritionBlock,
    NutritionDisplay,
    ParsedRecipe,
    TimeFields,
)

_LOGGER = logging.getLogger(__name__)

_AMOUNT = r"\d+\s+\d+\s*/\s*\d+|\d+\s*/\s*\d+|\d+(?:\.\d+)?"
_DURATION_RE = re.compile(
    rf"(?<![\d./])(?:({_AMOUNT})\s*h(?:ours?|rs?)?\b)?\s*(?:({_AMOUNT})\s*m(?:inutes?|ins?)?\b)?",
    re.IGNORECASE,
)
_PER_SERVING_RE = re.compile(r"^\s*\S.*\bper\s+serving\s*\.?\s*$", re.IGNORECASE)
_SERVING_NOTE_RE = re.compile(r"\(|\bnote\b", re.IGNORECASE)
_SERVING_LABEL_RE = re.compile(
    r"^(?:serving\s+size|portion\s+size|yield)\s*:?\s*", re.IGNORECASE)
_INTEGER_RE = re.compile(r"\d+")
_LEADING_QUANTITY_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)")
_GRAMS_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:g|grams?)\b", re.IGNORECASE)


def parse_minutes(text: str | None) -> int | None:
    """Parse a '<N>h <M>m' shaped duration into minutes.

    Examples:
        >>> parse_minutes('1h 10m')
        70
        >>> parse_minutes('20 minutes')
        20
        >>> parse_minutes('soon') is None
        True
    """
    if not text:
        return None

    for match in _DURATION_RE.finditer(text):
        hours, minutes = match.groups()
        if hours is None and minutes is None:
            continue
        try:
            total = _parse_amount(hours) * 60 + _parse_amount(minutes)
        except ZeroDivisionError:
            _LOGGER.debug("Ignoring duration with zero denominator: '%s'", match.group(0))
            continue
        return round(total)

    return None


def _parse_amount(amount: str | None) -> float:
    """Value of '2', '1.5', '1/2' or '1 1/2'; None counts as zero.

    Raises:
        ZeroDivisionError: If a fraction has a zero denominator
    """
    if not amount:
        return 0.0

    value = 0.0
    for part in re.sub(r"\s*/\s*", "/", amount).split():
        if "/" in part:
            numerator, denominator = part.split("/")
            value += int(numerator) / int(denominator)
        else:
            value += float(part)
    return value


def format_duration(minutes: int) -> str:
    """Render minutes as 'Xh Ym', omitting the hour segment when zero."""
    hours, rest = divmod(minutes, 60)
    if hours:
        return f"{hours}h {rest}m"
    return f"{rest}m"


def format_minutes(minutes: int | None) -> str:
    """Render minutes for display, e.g. '30 minutes'."""
    if minutes is None:
        return UNKNOWN_VALUE
    return f"{minutes} minutes"


def _usable_total(value: str | None) -> str | None:
    if not value or not value.strip():
        return None
    if value.strip().lower().rstrip(":") == TOTAL_TIME_ARTIFACT.rstrip(":"):
        _LOGGER.debug("Ignoring total time header artifact '%s'", value)
        return None
    return value.strip()


def compute_total_time(times: TimeFields, section_total: str | None = None) -> tuple[str | None, int | None]:
    """Work out the total time of a recipe.

    Prep plus cook time wins when both are present and their sum is
    positive. Otherwise an explicitly stated total is used: first one
    embedded next to prep/cook time, then the recipe's total time section.

    Args:
        times: Embedded prep/cook/total time strings
        section_total: The raw value of the total time section

    Returns:
        Tuple of (rendered total time, total minutes); either may be None
    """
    prep = parse_minutes(times.prep)
    cook = parse_minutes(times.cook)

    if times.prep and times.cook and prep is not None and cook is not None:
        total = prep + cook
        if total > 0:
            return format_duration(total), total

    for candidate in (times.total, section_total):
        explicit = _usable_total(candidate)
        if explicit:
            return explicit, parse_minutes(explicit)

    return None, None


def parse_servings_count(servings: str | None) -> int | None:
    """Return the first positive integer of a 'serves' value."""
    if not servings:
        return None
    match = _INTEGER_RE.search(servings)
    if not match:
        return None
    count = int(match.group())
    return count if count > 0 else None


def format_serving_size(serving_size: str | None, servings: str | None) -> str:
    """Build the display serving-size sentence.

    Precedence:
        1. An explicit serving size without a parenthetical or note:
           used verbatim when it reads '<amount> per serving', otherwise
           rendered as '1 <text> per serving'.
        2. A numeric 'serves N': '1 of N portions (estimated)'.
        3. 'Serving size not specified'.

    Examples:
        >>> format_serving_size('1 cup per serving', None)
        '1 cup per serving'
        >>> format_serving_size(None, '4')
        '1 of 4 portions (estimated)'
    """
    if serving_size and serving_size.strip() and not _SERVING_NOTE_RE.search(serving_size):
        text = serving_size.strip()
        if _PER_SERVING_RE.match(text):
            return text
        cleaned = _SERVING_LABEL_RE.sub("", text).strip().rstrip(".")
        if cleaned:
            return f"1 {cleaned} per serving"

    count = parse_servings_count(servings)
    if count is not None:
        return f"1 of {count} portions (estimated)"

    return SERVING_SIZE_NOT_SPECIFIED


def _ingredient_calories(ingredient: str) -> float:
    """Calories contributed by one ingredient; the first table match wins."""
    lowered = ingredient.lower()
    for name, calories in CALORIE_TABLE.items():
        if name not in lowered:
            continue

        if name == "goat cheese":
            match = _GRAMS_RE.search(lowered)
            quantity = float(match.group(1)) / GOAT_CHEESE_GRAMS_PER_UNIT if match else 1.0
        else:
            match = _LEADING_QUANTITY_RE.match(lowered)
            quantity = float(match.group(1)) if match else 1.0

        _LOGGER.debug("Estimated %s as %.2f x %s (%d kcal)",
                      ingredient, quantity, name, calories)
        return quantity * calories

    return 0.0


def estimate_calories(ingredients: Iterable[str]) -> int | None:
    """Estimate total calories from ingredient lines.

    Args:
        ingredients: Ingredient lines such as '2 tablespoons olive oil'

    Returns:
        The rounded estimate, or None if nothing in the table matched

    Examples:
        >>> estimate_calories(['2 tablespoons olive oil', '1 medium onion'])
        285
    """
    total = sum(_ingredient_calories(ingredient) for ingredient in ingredients)
    if total <= 0:
        return None
    return round(total)


def derive_fields(recipe: ParsedRecipe, block: NutritionBlock) -> DerivedFields:
    """Compute the derived view of a parsed recipe.

    Args:
        recipe: The parsed recipe (left untouched)
        block: The parsed nutrition block

    Returns:
        Total time, serving size and calories ready for display
    """
    total_time, total_minutes = compute_total_time(block.times, recipe.total_time)

    calories = block.facts.facts.get("Calories")
    calories_estimated = False
    if not calories:
        estimate = estimate_calories(recipe.ingredients)
        if estimate is not None:
            calories = f"~{estimate} (estimated)"
            calories_estimated = True
            _LOGGER.info("Estimated %d calories for '%s' from ingredients",
                         estimate, recipe.title)

    return DerivedFields(
        prep_minutes=parse_minutes(block.times.prep),
        cook_minutes=parse_minutes(block.times.cook),
        total_minutes=total_minutes,
        total_time=total_time,
        serving_size=format_serving_size(recipe.serving_size, recipe.servings),
        calories=calories,
        calories_estimated=calories_estimated,
        original_servings=parse_servings_count(recipe.servings) or 1,
    )


def build_nutrition_display(block: NutritionBlock, derived: DerivedFields) -> NutritionDisplay:
    """Build the always-populated nutrition and timing labels."""
    facts = block.facts.facts

    if derived.total_minutes is not None:
        total_time = format_minutes(derived.total_minutes)
    else:
        total_time = derived.total_time or UNKNOWN_VALUE

    return NutritionDisplay(
        calories=derived.calories or UNKNOWN_VALUE,
        protein=facts.get("Protein") or UNKNOWN_VALUE,
        carbs=facts.get("Carbs") or UNKNOWN_VALUE,
        fat=facts.get("Fat") or UNKNOWN_VALUE,
        prep_time=format_minutes(derived.prep_minutes),
        cook_time=format_minutes(derived.cook_minutes),
        total_time=total_time,
        serving_size=derived.serving_size,
    )
