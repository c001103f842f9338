#!/usr/bin/env python3
"""
Recipe Generator - Turn leftover ingredients into a recipe

Asks Gemini for a recipe built from leftover ingredients (or reads an
already generated recipe from a file), parses it into structured data, and
saves it as JSON and as an HTML recipe card.
"""
import argparse
import html
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from leftovers.const import (
    AVAILABLE_MODELS,
    CORE_NUTRITION_LABELS,
    DEFAULT_MODEL,
    EMPTY_INGREDIENTS_MESSAGE,
    ENV_GEMINI_API_KEY,
    ENV_REPLICATE_API_TOKEN,
)
from leftovers.exceptions import LeftoversError
from leftovers.models.recipe import RecipeCard, RecipeOptions, SubstitutionSuggestion
from leftovers.parsers.recipe_text_parser import parse_recipe_text
from leftovers.services.recipe_service import (
    build_recipe_card,
    generate_recipe,
    suggest_substitutions,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


def _list_items(items: list[str] | None, css_class: str) -> str:
    return "\n".join(
        f'                <li class="{css_class}">{html.escape(item)}</li>' for item in items or [])


def generate_html_card(card: RecipeCard) -> str:
    """Render a recipe card as a standalone HTML page.

    Args:
        card: The recipe card to render

    Returns:
        HTML document as a string
    """
    nutrition = card.nutrition
    ingredients = _list_items(card.ingredients, "ingredient") or \
        f'                <li class="empty">{EMPTY_INGREDIENTS_MESSAGE}</li>'
    facts = "\n".join(
        f'            <div class="fact">{label}<br>{html.escape(getattr(nutrition, label.lower()))}</div>'
        for label in CORE_NUTRITION_LABELS)

    page = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{html.escape(card.title)}</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background: #f9fafb; }}
        .card {{ max-width: 720px; margin: 32px auto; background: white; border: 1px solid #e5e7eb; border-radius: 8px; padding: 24px; }}
        .facts {{ display: grid; grid-template-columns: repeat(4, 1fr); gap: 8px; }}
        .fact {{ background: #f3f4f6; border-radius: 6px; padding: 8px; text-align: center; }}
        .warning {{ background: #fef3c7; color: #92400e; padding: 8px; border-radius: 6px; }}
        .empty {{ color: #9ca3af; }}
    </style>
</head>
<body>
    <div class="card">
        <h1>{html.escape(card.title)}</h1>
"""
    if card.image_url:
        page += f'        <img src="{html.escape(card.image_url)}" alt="{html.escape(card.title)}" width="512">\n'
    if card.warning:
        page += f'        <p class="warning">{html.escape(card.warning)}</p>\n'

    page += f"""        <p>Servings: {card.desired_servings} &middot; {html.escape(nutrition.serving_size)}</p>
        <div class="facts">
{facts}
        </div>
        <p>Prep: {html.escape(nutrition.prep_time)} &middot; Cook: {html.escape(nutrition.cook_time)} &middot; Total: {html.escape(nutrition.total_time)}</p>

        <h2>Ingredients</h2>
        <ul>
{ingredients}
        </ul>

        <h2>Instructions</h2>
        <ol>
{_list_items(card.instructions, "step")}
        </ol>
"""
    if card.substitutions:
        page += f"""
        <h2>Substitutions</h2>
        <ul>
{_list_items(card.substitutions, "substitution")}
        </ul>
"""
    if card.tips:
        page += f"""
        <h2>Cooking Tips</h2>
        <ul>
{_list_items(card.tips, "tip")}
        </ul>
"""
    page += """    </div>
</body>
</html>
"""
    return page


def save_recipe_card(card: RecipeCard, output_dir: Path) -> tuple[Path, Path]:
    """Save a recipe card as JSON and HTML.

    Returns:
        Tuple of (json_file, html_file)
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    # Generate output filename based on recipe title
    safe_title = "".join(c for c in card.title if c.isalnum() or c in (' ', '-', '_')).rstrip()
    safe_title = safe_title.replace(' ', '_').lower()
    if not safe_title:
        safe_title = "recipe"

    json_file = output_dir / f"{safe_title}.json"
    logger.info(f"Saving structured recipe to: {json_file}")
    with open(json_file, 'w', encoding='utf-8') as f:
        json.dump(card.model_dump(), f, indent=2, ensure_ascii=False)

    html_file = output_dir / f"{safe_title}.html"
    logger.info(f"Creating HTML recipe card: {html_file}")
    with open(html_file, 'w', encoding='utf-8') as f:
        f.write(generate_html_card(card))

    return json_file, html_file


def print_substitutions(suggestions: list[SubstitutionSuggestion], as_json: bool = False):
    """Print substitution suggestions as JSON or as an indented list."""
    if as_json:
        print(json.dumps([s.model_dump() for s in suggestions], indent=2, ensure_ascii=False))
        return

    if not suggestions:
        print("No substitutions found.")
        return

    for suggestion in suggestions:
        print(f"\n🔁 {suggestion.ingredient}")
        for option in suggestion.options:
            note = f" ({option.note})" if option.note else ""
            print(f"   - {option.text}{note}")


def main():
    """Main entry point for the recipe generator."""
    parser = argparse.ArgumentParser(
        description="Generate a recipe from leftover ingredients and save it as structured JSON"
    )
    parser.add_argument(
        "ingredients",
        nargs="?",
        default="",
        help="Comma separated leftover ingredients, e.g. 'leftover rice, onion, capsicum'"
    )
    parser.add_argument(
        "--from-file",
        type=Path,
        help="Parse an already generated recipe text file instead of calling Gemini"
    )
    parser.add_argument(
        "--servings",
        type=int,
        help="Scale ingredients to this many servings"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Directory to save output files (default: ./output)"
    )
    parser.add_argument(
        "--api-key",
        help=f"Gemini API key (can also be set via {ENV_GEMINI_API_KEY} env var)"
    )
    parser.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        choices=AVAILABLE_MODELS,
        help=f"Model to use for generation (default: {DEFAULT_MODEL})"
    )
    parser.add_argument("--diet", default="", help="Diet, e.g. 'vegetarian'")
    parser.add_argument("--cuisine", default="other", help="Cuisine, e.g. 'indian'")
    parser.add_argument("--dish-type", default="", help="Dish type, e.g. 'soup'")
    parser.add_argument("--allergens", default="", help="Allergens to avoid")
    parser.add_argument("--difficulty", type=int, default=0, choices=range(0, 6),
                        help="Difficulty from 1 (easy) to 5 (hard)")
    parser.add_argument("--quick", action="store_true", help="Limit prep time to under 20 minutes")
    parser.add_argument("--healthy", action="store_true", help="Only healthy recipes")
    parser.add_argument("--image", action="store_true",
                        help=f"Generate an image (needs {ENV_REPLICATE_API_TOKEN})")
    parser.add_argument(
        "--substitutions",
        metavar="INGREDIENTS",
        help="Suggest substitutions for these comma separated ingredients instead of a recipe"
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    args = parser.parse_args()

    options = RecipeOptions(
        diet=args.diet,
        cuisine=args.cuisine,
        dish_type=args.dish_type,
        allergens=args.allergens,
        difficulty=args.difficulty,
        quick=args.quick,
        healthy=args.healthy,
    )

    try:
        if args.from_file:
            logger.info(f"Parsing recipe text from: {args.from_file}")
            result = parse_recipe_text(args.from_file.read_text(encoding='utf-8'))
            card = build_recipe_card(result, args.servings)
        else:
            api_key = args.api_key or os.getenv(ENV_GEMINI_API_KEY)
            if not api_key:
                logger.error(f"API key not provided. Set {ENV_GEMINI_API_KEY} env var or use --api-key")
                sys.exit(1)

            if args.substitutions is not None:
                suggestions = suggest_substitutions(
                    ingredients=args.substitutions.split(","),
                    options=options,
                    api_key=api_key,
                    model=args.model,
                )
                print_substitutions(suggestions, as_json=args.json)
                sys.exit(0)

            image_token = os.getenv(ENV_REPLICATE_API_TOKEN) if args.image else None
            card = generate_recipe(
                ingredients=args.ingredients,
                options=options,
                api_key=api_key,
                model=args.model,
                image_token=image_token,
                desired_servings=args.servings,
            )
    except (LeftoversError, ValueError, OSError) as e:
        logger.error(f"Error generating recipe: {str(e)}")
        sys.exit(1)

    if args.json:
        print(json.dumps(card.model_dump(), indent=2, ensure_ascii=False))
        sys.exit(0)

    json_file, html_file = save_recipe_card(card, args.output_dir)

    # Print summary
    print(f"\n✅ Recipe ready!")
    print(f"📝 Title: {card.title}")
    print(f"🥘 Ingredients: {len(card.ingredients)} (for {card.desired_servings} servings)")
    print(f"🔥 Calories: {card.nutrition.calories}")
    if card.warning:
        print(f"⚠️  {card.warning}")
    print(f"\n📄 Output files:")
    print(f"   - JSON: {json_file}")
    print(f"   - HTML: {html_file}")

    sys.exit(0)


if __name__ == "__main__":
    main()
