import json
import sys
from unittest.mock import patch

import pytest

import recipe_generator
from leftovers.const import CORE_NUTRITION_LABELS, EMPTY_INGREDIENTS_MESSAGE
from leftovers.models.recipe import SubstitutionOption, SubstitutionSuggestion
from leftovers.parsers.recipe_text_parser import parse_recipe_text
from leftovers.services.recipe_service import build_recipe_card


def test_html_card_contains_sections(full_recipe_text):
    card = build_recipe_card(parse_recipe_text(full_recipe_text))

    page = recipe_generator.generate_html_card(card)

    assert "<h1>Veggie Fried Rice</h1>" in page
    assert "2 tablespoons olive oil" in page
    assert "Cooking Tips" in page
    assert "Calories<br>350" in page


def test_html_card_placeholders_and_escaping():
    card = build_recipe_card(parse_recipe_text("Mac & Cheese <3"))

    page = recipe_generator.generate_html_card(card)

    assert "Mac &amp; Cheese &lt;3" in page
    assert EMPTY_INGREDIENTS_MESSAGE in page
    assert "Substitutions" not in page


def test_save_recipe_card(tmp_path, simple_recipe_text):
    card = build_recipe_card(parse_recipe_text(simple_recipe_text))

    json_file, html_file = recipe_generator.save_recipe_card(card, tmp_path)

    assert json_file.name == "veggie_fried_rice.json"
    assert json.loads(json_file.read_text(encoding="utf-8"))["title"] == "Veggie Fried Rice"
    assert html_file.exists()


def test_main_parses_file_to_json(tmp_path, monkeypatch, capsys, simple_recipe_text):
    recipe_file = tmp_path / "recipe.txt"
    recipe_file.write_text(simple_recipe_text, encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [
        "recipe_generator.py", "--from-file", str(recipe_file), "--servings", "4", "--json"])

    with pytest.raises(SystemExit) as excinfo:
        recipe_generator.main()

    assert excinfo.value.code == 0
    card = json.loads(capsys.readouterr().out)
    assert card["ingredients"] == ["4 cups rice", "2 onion"]
    assert card["desired_servings"] == 4


def test_main_requires_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setattr(sys, "argv", ["recipe_generator.py", "rice, onion"])

    with pytest.raises(SystemExit) as excinfo:
        recipe_generator.main()

    assert excinfo.value.code == 1


def test_html_card_shows_every_core_fact(simple_recipe_text):
    card = build_recipe_card(parse_recipe_text(simple_recipe_text))

    page = recipe_generator.generate_html_card(card)

    for label in CORE_NUTRITION_LABELS:
        assert f'<div class="fact">{label}<br>' in page
    assert "Protein<br>10g" in page
    assert "Carbs<br>—" in page


def test_main_rejects_unknown_model(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["recipe_generator.py", "rice", "--model", "gpt-4"])

    with pytest.raises(SystemExit) as excinfo:
        recipe_generator.main()

    assert excinfo.value.code == 2


def test_main_suggests_substitutions(monkeypatch, capsys):
    suggestions = [SubstitutionSuggestion(
        ingredient="Butter", options=(SubstitutionOption(text="Ghee", note="nuttier"),))]
    monkeypatch.setattr(sys, "argv", [
        "recipe_generator.py", "--api-key", "secret", "--substitutions", "butter", "--json"])

    with patch("recipe_generator.suggest_substitutions", return_value=suggestions) as suggest:
        with pytest.raises(SystemExit) as excinfo:
            recipe_generator.main()

    assert excinfo.value.code == 0
    assert suggest.call_args.kwargs["ingredients"] == ["butter"]
    assert suggest.call_args.kwargs["api_key"] == "secret"
    printed = json.loads(capsys.readouterr().out)
    assert printed == [{"ingredient": "Butter", "options": [{"text": "Ghee", "note": "nuttier"}]}]


def test_print_substitutions_as_text(capsys):
    recipe_generator.print_substitutions([SubstitutionSuggestion(
        ingredient="Milk", options=(SubstitutionOption(text="Oat milk"),))])

    out = capsys.readouterr().out
    assert "Milk" in out
    assert "   - Oat milk\n" in out
