"""
Text normalization helpers.

Generated recipes carry markdown emphasis ('**Ingredients:**', '## Tips')
and list markers. These helpers strip them so every other parser can work
on plain text.
"""
from __future__ import annotations

import re

_EMPHASIS_RE = re.compile(r"[*#]")
_LEADING_MARKER_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)](?!\d))\s*")


def normalize(text: str | None) -> str:
    """Remove emphasis markers and surrounding whitespace.

    Args:
        text: Any text fragment (None is treated as empty)

    Returns:
        The text without '*' and '#' characters, stripped

    Examples:
        >>> normalize('**Veggie Fried Rice**')
        'Veggie Fried Rice'
        >>> normalize('## Ingredients ')
        'Ingredients'
    """
    if not text:
        return ""
    return _EMPHASIS_RE.sub("", text).strip()


def clean_line(line: str | None) -> str:
    """Normalize, then strip a single leading bullet or ordinal.

    Examples:
        >>> clean_line('- 2 cups rice')
        '2 cups rice'
        >>> clean_line('12. Serve hot.')
        'Serve hot.'
    """
    if not line:
        return ""
    return _LEADING_MARKER_RE.sub("", normalize(line), count=1).strip()
