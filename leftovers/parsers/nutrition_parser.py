"""
Nutrition Sub-Parser.

This module extracts labeled nutrition facts, a free-text note, and any
embedded prep/cook/total time fields from the nutrition block of a
generated recipe.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable

from ..const import NUTRITION_WARNING
from ..models.recipe import NutritionBlock, NutritionFacts, TimeFields
from .text_normalizer import clean_line

_LOGGER = logging.getLogger(__name__)

_NOTE_RE = re.compile(r"^notes?\s*:", re.IGNORECASE)
_CALORIES_RE = re.compile(
    r"^(?:estimated\s+)?(?:calories|energy)(?:\s+per\s+serving)?\s*(?:\([^)]*\))?\s*:",
    re.IGNORECASE,
)
_NUTRIENT_RE = re.compile(
    r"^(?:total\s+)?(protein|carb(?:ohydrate)?s?|fat|sodium|fib(?:er|re)|vitamin|iron|calcium|potassium)\b[^:]*:",
    re.IGNORECASE,
)
_TIME_RE = re.compile(
    r"^(prep(?:aration)?|cook(?:ing)?|total)\s+time\b[^:]*:",
    re.IGNORECASE,
)

# Looser checks run over the whole generated text
_CALORIES_CHECK_RE = re.compile(
    r"Calories\s*:\s*[~≈]?(?:Approximately\s*)?\d+", re.IGNORECASE)
_PROTEIN_CHECK_RE = re.compile(
    r"Protein\s*:\s*[~≈]?(?:Approximately\s*)?\d+", re.IGNORECASE)

_CANONICAL_LABELS = {
    "protein": "Protein",
    "fat": "Fat",
}


def _split_label(line: str) -> tuple[str, str]:
    label, _, value = line.partition(":")
    return label.strip(), value.strip()


def _canonical_label(keyword: str, label: str) -> str:
    keyword = keyword.lower()
    if keyword.startswith("carb"):
        return "Carbs"
    return _CANONICAL_LABELS.get(keyword, label)


def parse_nutrition(lines: Iterable[str] | str | None) -> NutritionBlock:
    """Parse the nutrition block of a recipe.

    Each line is classified by the first matching pattern: note, calories,
    a known nutrient, then an embedded time field. Unmatched lines are
    ignored. A label seen twice keeps its first value.

    Args:
        lines: The block's lines, or the block as newline joined text

    Returns:
        The nutrition facts, note and embedded time fields
    """
    if lines is None:
        return NutritionBlock()
    if isinstance(lines, str):
        lines = lines.splitlines()

    facts: dict[str, str] = {}
    note = None
    times: dict[str, str] = {}

    for raw_line in lines:
        line = clean_line(raw_line)
        if not line:
            continue

        if _NOTE_RE.match(line):
            _, value = _split_label(line)
            if value and note is None:
                note = value
            continue

        if _CALORIES_RE.match(line):
            _, value = _split_label(line)
            if value:
                facts.setdefault("Calories", value)
            continue

        match = _NUTRIENT_RE.match(line)
        if match:
            label, value = _split_label(line)
            if value:
                facts.setdefault(_canonical_label(match.group(1), label), value)
            continue

        match = _TIME_RE.match(line)
        if match:
            _, value = _split_label(line)
            field = match.group(1).lower()
            field = "prep" if field.startswith("prep") else "cook" if field.startswith("cook") else "total"
            if value:
                times.setdefault(field, value)
            continue

        _LOGGER.debug("Ignoring unrecognized nutrition line: '%s'", line)

    _LOGGER.debug("Parsed %d nutrition facts and %d time fields",
                  len(facts), len(times))

    return NutritionBlock(
        facts=NutritionFacts(facts=facts, note=note),
        times=TimeFields(**times),
    )


def has_number(value: str | None) -> bool:
    return bool(value) and any(char.isdigit() for char in value)


def nutrition_warning(text: str | None, facts: NutritionFacts, calories_known: bool = False) -> str | None:
    """Return an advisory warning when Calories or Protein is missing.

    The check passes when the raw text carries a recognizable entry, when
    the fact was parsed with a number, or (for calories) when an estimate
    was made.

    Args:
        text: The complete generated text
        facts: The parsed nutrition facts
        calories_known: Whether calories were estimated from ingredients

    Returns:
        The warning message, or None if nutrition data looks complete
    """
    text = text or ""
    has_calories = (calories_known
                    or has_number(facts.facts.get("Calories"))
                    or bool(_CALORIES_CHECK_RE.search(text)))
    has_protein = (has_number(facts.facts.get("Protein"))
                   or bool(_PROTEIN_CHECK_RE.search(text)))

    if has_calories and has_protein:
        return None

    _LOGGER.warning("Incomplete nutrition data (calories: %s, protein: %s)",
                    has_calories, has_protein)
    return NUTRITION_WARNING
