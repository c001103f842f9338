"""
Section Segmenter.

This module locates the recognized sections of a generated recipe by
scanning its non-empty lines for section keywords.
"""
from __future__ import annotations

import logging
import re

from ..models.recipe import SectionBoundaries, SectionKind
from .text_normalizer import clean_line, normalize

_LOGGER = logging.getLogger(__name__)

# Keyword matched (as a substring of the lowercased line) for each section
SECTION_PATTERNS: dict[SectionKind, re.Pattern[str]] = {
    SectionKind.INGREDIENTS: re.compile(r"ingredient"),
    SectionKind.INSTRUCTIONS: re.compile(r"instruction"),
    SectionKind.SUBSTITUTIONS: re.compile(r"substitution"),
    SectionKind.TIPS: re.compile(r"tip"),
    SectionKind.NUTRITION: re.compile(r"nutrition"),
    SectionKind.TOTAL_TIME: re.compile(r"total time"),
    SectionKind.SERVES: re.compile(r"serves"),
    SectionKind.SERVING_SIZE: re.compile(r"serving size|portion size|yield"),
}

_TITLE_MARKER_RE = re.compile(r"recipe title|^title\s*:")

# A line that is nothing but a section header, e.g. '2. Ingredients List:'
_HEADER_LINE_RE = re.compile(
    r"^(?:(?:list of|cooking|step-by-step|suggested|estimated|possible|optional)\s+)?"
    r"(?:ingredients?|instructions?|directions?|substitutions?|tips?"
    r"|nutrition(?:al)?(?:\s+(?:information|info|facts))?"
    r"|total\s+time(?:\s+required)?|serves|serving\s+size|portion\s+size"
    r"|yield|recipe\s+title)"
    r"(?:\s+list)?\s*(?:\([^)]*\))?\s*:?$"
)


def classify_line(line: str) -> SectionKind | None:
    """Return the first section kind whose keyword the line contains.

    Args:
        line: A raw or cleaned line of recipe text

    Returns:
        The claiming SectionKind, or None if no keyword matches
    """
    lowered = normalize(line).lower()
    for kind, pattern in SECTION_PATTERNS.items():
        if pattern.search(lowered):
            return kind
    return None


def is_header_line(line: str) -> bool:
    """Check whether a line consists of a bare section header only."""
    return bool(_HEADER_LINE_RE.match(clean_line(line).lower()))


def split_lines(text: str | None) -> list[str]:
    """Split raw text into stripped, non-empty lines."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def _find_title(lines: list[str]) -> tuple[str | None, int | None]:
    """Locate the title, preferring an explicit 'Recipe Title' marker."""
    for index, line in enumerate(lines):
        cleaned = clean_line(line)
        if not _TITLE_MARKER_RE.search(cleaned.lower()):
            continue

        _, _, after_marker = cleaned.partition(":")
        if after_marker.strip():
            return normalize(after_marker), index
        if index + 1 < len(lines):
            return clean_line(lines[index + 1]), index + 1

    if lines and not is_header_line(lines[0]):
        return clean_line(lines[0]), 0

    return None, None


def segment(text: str | None) -> SectionBoundaries:
    """Locate the start line of every recognized section.

    Each line is claimed by at most one section: the first kind, in scan
    order, whose keyword it contains. Only the first claimed line of each
    kind is recorded, so section starts always refer to the earliest header.

    Args:
        text: The raw recipe text

    Returns:
        The section boundaries; sections that were not found are absent
    """
    lines = split_lines(text)
    title, title_index = _find_title(lines)

    starts: dict[SectionKind, int] = {}
    for index, line in enumerate(lines):
        if index == title_index:
            continue
        kind = classify_line(line)
        if kind is not None and kind not in starts:
            starts[kind] = index
            _LOGGER.debug("Found %s section at line %d: '%s'",
                          kind.value, index, line)

    _LOGGER.debug("Segmented %d lines into %d sections (title: %s)",
                  len(lines), len(starts), title)

    return SectionBoundaries(
        lines=tuple(lines),
        title=title or None,
        title_index=title_index,
        starts=starts,
    )
