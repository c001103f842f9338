"""
Ingredient Formatter and Scaler.

This module handles scaling of recipe ingredient lines to a desired number
of servings. Every numeric token in a line is scaled on its own and
rendered back as a whole number, a common kitchen fraction, or a single
decimal.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable

from ..const import COMMON_FRACTIONS, FRACTION_TOLERANCE

_LOGGER = logging.getLogger(__name__)

# Fractions first, then decimals, then integers
_QUANTITY_RE = re.compile(r"(\d+)\s*/\s*(\d+)|\d+\.\d+|\d+")


def format_quantity(quantity: float | int | None) -> str:
    """
    Format a scaled quantity for display.

    Args:
        quantity: The numeric quantity (can be int, float, or None)

    Returns:
        Formatted string (empty string if quantity is None)

    Examples:
        >>> format_quantity(2.0)
        '2'
        >>> format_quantity(0.5)
        '1/2'
        >>> format_quantity(0.34)
        '1/3'
        >>> format_quantity(2.25)
        '2.2'
    """
    if quantity is None:
        return ""

    # If it's a whole number, return without decimals
    if abs(quantity - round(quantity)) < 1e-9:
        return str(int(round(quantity)))

    closest_value, closest_text = min(
        COMMON_FRACTIONS, key=lambda fraction: abs(quantity - fraction[0]))
    if abs(quantity - closest_value) <= FRACTION_TOLERANCE:
        return closest_text

    # Otherwise, return with one decimal place, removing trailing zeros
    return f"{quantity:.1f}".rstrip('0').rstrip('.')


def _token_value(match: re.Match[str]) -> float:
    """Evaluate a matched numeric token, fractions included.

    Raises:
        ZeroDivisionError: If a fraction has a zero denominator
    """
    if match.group(1) is not None:
        return int(match.group(1)) / int(match.group(2))
    return float(match.group(0))


def scale_line(line: str, factor: float) -> str:
    """Scale every numeric token of an ingredient line.

    Tokens are scaled independently, so '2 x 3 oz' scales both numbers.
    Tokens that cannot be evaluated are left as they are.

    Args:
        line: An ingredient line such as '1/2 cup milk'
        factor: The scaling factor

    Returns:
        The line with scaled quantities
    """
    def _replace(match: re.Match[str]) -> str:
        try:
            return format_quantity(_token_value(match) * factor)
        except (ValueError, ZeroDivisionError) as e:
            _LOGGER.debug("Leaving token '%s' unscaled: %s", match.group(0), e)
            return match.group(0)

    return _QUANTITY_RE.sub(_replace, line)


def scaling_factor(original_servings: int | float | None, desired_servings: int | float | None) -> float:
    """Ratio of desired to original servings.

    The original count defaults to 1 when unknown. A missing or
    non-positive desired count leaves quantities unchanged.
    """
    if original_servings is None or original_servings <= 0:
        original_servings = 1

    if desired_servings is None:
        return 1.0

    if desired_servings <= 0:
        _LOGGER.warning(
            "Cannot scale recipe: desired servings must be positive")
        return 1.0

    return desired_servings / original_servings


def scale_ingredients(
    ingredients: Iterable[str],
    original_servings: int | float | None,
    desired_servings: int | float | None
) -> list[str]:
    """Scale ingredient lines based on servings.

    The result is always computed from the given lines, which are left
    untouched, so repeated calls never compound.

    Args:
        ingredients: Ingredient lines, e.g. ['2 cups rice', '1 onion']
        original_servings: Servings the recipe was written for
        desired_servings: Servings to scale to

    Returns:
        A new list of scaled ingredient lines
    """
    factor = scaling_factor(original_servings, desired_servings)
    if factor == 1.0:
        return list(ingredients)

    _LOGGER.info("Scaling ingredients from %s to %s servings (factor: %.2f)",
                 original_servings, desired_servings, factor)

    scaled_ingredients = []
    for ingredient in ingredients:
        scaled = scale_line(ingredient, factor)
        _LOGGER.debug("Scaled '%s' -> '%s'", ingredient, scaled)
        scaled_ingredients.append(scaled)

    return scaled_ingredients
