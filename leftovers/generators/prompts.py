"""
Prompts for recipe and substitution generation.
"""
from __future__ import annotations

from ..models.recipe import RecipeOptions

RECIPE_PROMPT = """You are a helpful home cook. Given these ingredients: {ingredients}, return a detailed recipe with:
1. Recipe Title
2. Ingredients List (format each ingredient as "quantity unit ingredient", e.g. "2 cups rice", "1 medium onion", "3 tablespoons oil")
3. Instructions (step-by-step)
4. Substitutions
5. Cooking Tips
6. Nutritional Information (calories, protein, carbs, fat per serving)
7. Total Time Required (prep + cook time in minutes)
8. Estimate and include a serving size (e.g., "serves 2-3 people", "1 cup per serving", or "makes 4 portions") based on the recipe.

Only return the recipe."""

SUBSTITUTION_PROMPT = """Given these ingredients that need substitutions: {ingredients}, suggest possible substitutions for each ingredient that would work well in the same recipe.

For each ingredient, provide the information in this exact format:

• [original ingredient name]
  [substitution option 1] (Note: [brief note about taste/texture/cooking changes])
  [substitution option 2] (Note: [brief note about taste/texture/cooking changes])
  [substitution option 3] (Note: [brief note about taste/texture/cooking changes])

Do NOT add a hyphen, dash, or bullet before each substitution. Just start each substitution on a new line, indented under the ingredient. Make sure to:
- Keep each substitution concise and clear
- Include specific quantities where relevant
- Make notes brief but informative
- Consider the cuisine style ({cuisine})
- Add a blank line between different ingredients
- Keep the response clean and easy to read"""


def _choice(value: str, custom: str) -> str:
    """Resolve an option that may be 'other' plus a custom value."""
    if value == "other":
        return custom
    return value


def build_recipe_prompt(ingredients: str, options: RecipeOptions) -> str:
    """Build the recipe generation prompt for the given preferences.

    Args:
        ingredients: Comma separated leftover ingredients
        options: User preferences

    Returns:
        The prompt text
    """
    prompt = RECIPE_PROMPT.format(ingredients=ingredients)

    dish_type = _choice(options.dish_type, options.custom_dish_type)
    if dish_type:
        prompt += f"\n- This should be a {dish_type} dish."

    diet = _choice(options.diet, options.custom_diet)
    if diet:
        prompt += f"\n- Only use ingredients and methods suitable for: {diet}."

    if options.healthy:
        prompt += ("\n- Only show healthy recipes. Avoid deep frying, excess oil, sugar, "
                   "and processed foods. Prefer whole grains, lean proteins, and lots of vegetables.")

    cuisine = _choice(options.cuisine, options.custom_cuisine)
    if cuisine:
        prompt += f"\n- Focus on {cuisine} cuisine."

    if options.quick:
        prompt += "\n- Limit prep time to under 20 minutes."

    if options.allergens.strip():
        prompt += f"\n- Avoid all of these allergens: {options.allergens.strip()}"

    if options.difficulty:
        prompt += f"\n- Set the recipe difficulty to: {options.difficulty} (1=easy, 5=hard)."
    if options.difficulty >= 4:
        prompt += ("\n- Make the recipe especially innovative, creative, or unique. Use advanced "
                   "or unexpected techniques, flavor combinations, or presentation ideas.")
    elif options.difficulty == 3:
        prompt += "\n- Add a touch of creativity or a unique twist to the recipe."

    return prompt


def build_substitution_prompt(ingredients: list[str], options: RecipeOptions) -> str:
    """Build the prompt asking for substitutions of the given ingredients."""
    return SUBSTITUTION_PROMPT.format(
        ingredients=", ".join(ingredients),
        cuisine=_choice(options.cuisine, options.custom_cuisine) or "any",
    )
