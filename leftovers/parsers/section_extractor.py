"""
Section Extractors.

This module turns the lines between two section boundaries into cleaned
entries. Every extractor tolerates a missing section and a missing next
boundary.
"""
from __future__ import annotations

import logging
import re

from ..const import TOTAL_TIME_ARTIFACT
from ..models.recipe import SectionBoundaries, SectionKind
from .segmenter import SECTION_PATTERNS, is_header_line
from .text_normalizer import clean_line, normalize

_LOGGER = logging.getLogger(__name__)

# "Total Time Required: 30 minutes" keeps only the value after the artifact
_ARTIFACT_PREFIX_RE = re.compile(
    rf"^{re.escape(TOTAL_TIME_ARTIFACT.rstrip(':'))}\s*:\s*(?=\S)", re.IGNORECASE)


def extract(lines: list[str] | tuple[str, ...], start_exclusive: int, end_exclusive: int) -> list[str]:
    """Extract cleaned entries strictly between two line indices.

    Leading bullets and ordinals are removed. Empty lines and lines that are
    only a section header are dropped, which guards against header
    bleed-through when boundaries are imprecise.

    Args:
        lines: The non-empty lines of the recipe
        start_exclusive: Index of the section's own header line
        end_exclusive: Index of the next header, or len(lines)

    Returns:
        Cleaned entries in their original order
    """
    first = max(start_exclusive + 1, 0)
    last = min(end_exclusive, len(lines))

    entries = []
    for line in lines[first:last]:
        cleaned = clean_line(line)
        if not cleaned:
            continue
        if is_header_line(cleaned):
            _LOGGER.debug("Dropping header line inside section: '%s'", line)
            continue
        entries.append(cleaned)
    return entries


def extract_section(boundaries: SectionBoundaries, kind: SectionKind) -> list[str] | None:
    """Extract the entries of a section, or None if it was not found."""
    start = boundaries.start(kind)
    if start is None:
        return None
    return extract(boundaries.lines, start, boundaries.end(kind))


def extract_block(boundaries: SectionBoundaries, kind: SectionKind = SectionKind.NUTRITION) -> str | None:
    """Extract a section as a newline joined block of text."""
    entries = extract_section(boundaries, kind)
    if entries is None:
        return None
    return "\n".join(entries)


def _inline_value(header: str, kind: SectionKind) -> str:
    """Return the text following a section keyword on its header line."""
    text = normalize(header)
    match = SECTION_PATTERNS[kind].search(text.lower())
    if not match:
        return ""
    value = text[match.end():].strip().lstrip(":-–").strip()
    return _ARTIFACT_PREFIX_RE.sub("", value, count=1)


def extract_value(boundaries: SectionBoundaries, kind: SectionKind) -> str | None:
    """Extract a single value such as the serving count or total time.

    The text after the keyword on the header line wins ('Serves: 4' gives
    '4'); otherwise the first content line of the section is used.

    Args:
        boundaries: The segmented recipe
        kind: A section using the VALUE strategy

    Returns:
        The raw value, or None if the section is missing or empty
    """
    start = boundaries.start(kind)
    if start is None:
        return None

    inline = _inline_value(boundaries.lines[start], kind)
    if inline:
        return inline

    entries = extract(boundaries.lines, start, boundaries.end(kind))
    return entries[0] if entries else None
