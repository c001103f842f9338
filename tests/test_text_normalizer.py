import pytest

from leftovers.parsers.text_normalizer import clean_line, normalize


@pytest.mark.parametrize("text, expected", [
    ("**Veggie Fried Rice**", "Veggie Fried Rice"),
    ("## Ingredients ", "Ingredients"),
    ("  plain text  ", "plain text"),
    ("", ""),
    (None, ""),
])
def test_normalize(text, expected):
    assert normalize(text) == expected


@pytest.mark.parametrize("text", [
    "**Bold** and *italic*",
    "### Header ###",
    "  * bullet",
    "# * # *",
    "no markup",
])
def test_normalize_is_idempotent(text):
    assert normalize(normalize(text)) == normalize(text)


@pytest.mark.parametrize("line, expected", [
    ("- 2 cups rice", "2 cups rice"),
    ("* 1 onion", "1 onion"),
    ("• 3 tomatoes", "3 tomatoes"),
    ("1. Chop onion.", "Chop onion."),
    ("12. Serve hot.", "Serve hot."),
    ("3) Fry rice.", "Fry rice."),
    ("## 2. Ingredients", "Ingredients"),
    ("1.5 cups flour", "1.5 cups flour"),
    ("1/2 cup milk", "1/2 cup milk"),
])
def test_clean_line_strips_one_marker(line, expected):
    assert clean_line(line) == expected


def test_clean_line_keeps_inner_hyphens():
    assert clean_line("- stir-fry - quickly") == "stir-fry - quickly"
