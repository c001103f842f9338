"""
Substitution Suggestion Parser.

Parses the answer to a substitution request, where each original
ingredient is a bulleted line followed by indented replacement options
and groups are separated by blank lines:

    • Butter
      Coconut oil (Note: adds a mild coconut flavor)
      Olive oil (Note: best for savory dishes)
"""
from __future__ import annotations

import logging
import re

from ..models.recipe import SubstitutionOption, SubstitutionSuggestion
from .text_normalizer import clean_line

_LOGGER = logging.getLogger(__name__)

_NOTE_SUFFIX_RE = re.compile(r"\s*\(\s*note\s*:\s*(.*?)\s*\)\s*$", re.IGNORECASE)
_GROUP_START_RE = re.compile(r"^•")


def _parse_option(line: str) -> SubstitutionOption | None:
    cleaned = clean_line(line)
    if not cleaned:
        return None
    match = _NOTE_SUFFIX_RE.search(cleaned)
    if not match:
        return SubstitutionOption(text=cleaned)
    return SubstitutionOption(text=cleaned[:match.start()].strip(), note=match.group(1) or None)


def _split_groups(text: str) -> list[list[str]]:
    """Split text into groups on blank lines or a new bulleted ingredient."""
    groups: list[list[str]] = []
    current: list[str] = []
    for line in text.splitlines():
        if not line.strip():
            if current:
                groups.append(current)
                current = []
            continue
        if current and _GROUP_START_RE.match(line):
            groups.append(current)
            current = []
        current.append(line)
    if current:
        groups.append(current)
    return groups


def parse_substitution_suggestions(text: str | None) -> list[SubstitutionSuggestion]:
    """Parse substitution suggestions into per-ingredient groups.

    Args:
        text: The raw suggestion text

    Returns:
        One SubstitutionSuggestion per original ingredient, in order
    """
    if not text:
        return []

    suggestions = []
    for group in _split_groups(text):
        ingredient = clean_line(group[0]).rstrip(":").strip()
        if not ingredient:
            continue

        options = [option for option in (_parse_option(line) for line in group[1:]) if option]
        suggestions.append(SubstitutionSuggestion(
            ingredient=ingredient, options=tuple(options)))
        _LOGGER.debug("Parsed %d substitutions for '%s'",
                      len(options), ingredient)

    return suggestions
