import pytest
from pydantic import ValidationError

from leftovers.const import NUTRITION_WARNING, UNTITLED_RECIPE
from leftovers.models.recipe import SectionKind
from leftovers.parsers.base_parser import BaseRecipeParser
from leftovers.parsers.recipe_text_parser import RecipeTextParser, parse_recipe_text
from leftovers.parsers.segmenter import segment


def test_end_to_end_simple_recipe(simple_recipe_text):
    result = parse_recipe_text(simple_recipe_text)

    assert result.recipe.title == "Veggie Fried Rice"
    assert result.recipe.ingredients == ("2 cups rice", "1 onion")
    assert result.recipe.instructions == ("Chop onion.", "Fry rice.")
    assert result.nutrition.facts.facts["Calories"] == "400"
    assert result.nutrition.facts.facts["Protein"] == "10g"
    assert result.warning is None
    assert result.display.serving_size == "1 of 2 portions (estimated)"
    assert result.display.calories == "400"
    assert result.derived.original_servings == 2


def test_full_recipe(full_recipe_text):
    result = RecipeTextParser().parse(full_recipe_text)
    recipe = result.recipe

    assert recipe.title == "Veggie Fried Rice"
    assert recipe.ingredients == (
        "2 cups cooked rice",
        "1 medium onion, diced",
        "1/2 capsicum, chopped",
        "2 tablespoons olive oil",
    )
    assert recipe.instructions == (
        "Heat the oil in a wok.",
        "Add the onion and capsicum; stir-fry for 3 minutes.",
        "Add the rice and fry until hot.",
    )
    assert recipe.substitutions == ("Use brown rice instead of white rice.",)
    assert recipe.tips == ("Day-old rice fries best.",)
    assert recipe.servings == "2"
    assert recipe.serving_size is None
    assert recipe.total_time == "Required"

    assert result.nutrition.facts.note == "Values are approximate."
    assert result.display.carbs == "55g"
    assert result.display.fat == "10g"
    assert result.display.prep_time == "10 minutes"
    assert result.display.cook_time == "15 minutes"
    assert result.display.total_time == "25 minutes"
    assert result.derived.total_time == "25m"
    assert result.warning is None


def test_missing_sections_parse_without_failure():
    result = parse_recipe_text("Simple Salad\nIngredients:\n- 1 tomato\n- 1 onion")

    assert result.recipe.ingredients == ("1 tomato", "1 onion")
    assert result.recipe.instructions == ()
    assert result.recipe.tips is None
    assert result.recipe.substitutions is None
    assert result.recipe.nutrition is None
    assert result.display.calories == "~67 (estimated)"
    assert result.warning == NUTRITION_WARNING


@pytest.mark.parametrize("text", ["", None, "\n\n   \n", "just one line", "**", "1.\n2.\n-"])
def test_malformed_input_never_raises(text):
    result = parse_recipe_text(text)

    assert result.recipe.title
    assert result.display.serving_size


def test_empty_text_uses_placeholders():
    result = parse_recipe_text("")

    assert result.recipe.title == UNTITLED_RECIPE
    assert result.recipe.ingredients == ()
    assert result.display.calories == "—"
    assert result.warning == NUTRITION_WARNING


def test_time_fields_inside_nutrition_block():
    text = (
        "Lentil Soup\n"
        "Ingredients:\n- 1 cup lentils\n"
        "Nutrition:\nCalories: 300\nProtein: 18g\n"
        "Prep time: 1h 10m\nCook time: 0m\n"
        "Total Time: 2 hours\n"
    )

    result = parse_recipe_text(text)

    assert result.derived.total_minutes == 70
    assert result.display.total_time == "70 minutes"


def test_fractional_hours_in_time_fields():
    text = (
        "Beef Stew\n"
        "Ingredients:\n- 1 onion\n"
        "Nutrition:\nCalories: 450\nProtein: 30g\n"
        "Prep time: 15 minutes\nCook time: 1.5 hours\n"
    )

    result = parse_recipe_text(text)

    assert result.display.cook_time == "90 minutes"
    assert result.derived.total_minutes == 105
    assert result.display.total_time == "105 minutes"


def test_total_time_section_fallback():
    text = "Toast\nIngredients:\n- 1 slice bread\nTotal Time: 5 minutes\n"

    result = parse_recipe_text(text)

    assert result.recipe.total_time == "5 minutes"
    assert result.display.total_time == "5 minutes"


def test_parsed_recipe_is_immutable(simple_recipe_text):
    recipe = RecipeTextParser().parse_recipe(simple_recipe_text)

    with pytest.raises(ValidationError):
        recipe.title = "Something else"


def test_parse_result_mappings_are_read_only(simple_recipe_text):
    result = parse_recipe_text(simple_recipe_text)
    boundaries = segment(simple_recipe_text)

    with pytest.raises(TypeError):
        result.nutrition.facts.facts["Calories"] = "0"
    with pytest.raises(TypeError):
        boundaries.starts[SectionKind.TIPS] = 0
    assert result.nutrition.facts.facts["Calories"] == "400"


def test_parse_result_dumps_plain_dicts(simple_recipe_text):
    dumped = parse_recipe_text(simple_recipe_text).model_dump()

    assert dumped["nutrition"]["facts"]["facts"] == {"Calories": "400", "Protein": "10g"}


def test_parsing_is_stateless(simple_recipe_text, full_recipe_text):
    parser = RecipeTextParser()

    first = parser.parse(simple_recipe_text)
    parser.parse(full_recipe_text)
    again = parser.parse(simple_recipe_text)

    assert first == again


def test_total_time_required_prefix_is_not_shown():
    text = "Soup\nIngredients:\n- 1 carrot\n**Total Time Required:** 30 minutes\n"

    result = parse_recipe_text(text)

    assert result.recipe.total_time == "30 minutes"
    assert result.derived.total_time == "30 minutes"
    assert result.display.total_time == "30 minutes"


def test_parser_implements_the_parser_interface():
    class RecipeOnlyParser(BaseRecipeParser):
        def parse_recipe(self, text):
            return RecipeTextParser().parse_recipe(text)

    assert isinstance(RecipeTextParser(), BaseRecipeParser)
    with pytest.raises(TypeError):
        RecipeOnlyParser()
