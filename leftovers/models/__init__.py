"""Models package."""
from .recipe import (
    DerivedFields,
    NutritionBlock,
    NutritionDisplay,
    NutritionFacts,
    ParsedRecipe,
    ParseResult,
    RecipeCard,
    RecipeOptions,
    SectionBoundaries,
    SectionKind,
    SectionStrategy,
    SubstitutionOption,
    SubstitutionSuggestion,
    TimeFields,
)

__all__ = [
    "DerivedFields",
    "NutritionBlock",
    "NutritionDisplay",
    "NutritionFacts",
    "ParsedRecipe",
    "ParseResult",
    "RecipeCard",
    "RecipeOptions",
    "SectionBoundaries",
    "SectionKind",
    "SectionStrategy",
    "SubstitutionOption",
    "SubstitutionSuggestion",
    "TimeFields",
]
