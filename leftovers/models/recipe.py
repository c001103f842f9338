"""
Recipe data models for the leftovers recipe parser.

This module defines the Pydantic models used to structure recipe data
parsed from free-form, AI-generated recipe text. Parsed records are frozen:
scaling and derived values are computed on top of them, never written back.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from ..const import UNKNOWN_VALUE, UNTITLED_RECIPE


def _read_only(value: Mapping) -> Mapping:
    """Wrap a validated mapping so frozen models stay immutable."""
    return MappingProxyType(dict(value))


class SectionStrategy(str, Enum):
    """How the content of a section is turned into values."""

    LIST = "list"
    BLOCK = "block"
    VALUE = "value"


class SectionKind(str, Enum):
    """The recognized sections of a generated recipe, in scan order.

    A header line is claimed by the first kind whose keyword it contains,
    so the declaration order here is significant.
    """

    INGREDIENTS = "ingredients"
    INSTRUCTIONS = "instructions"
    SUBSTITUTIONS = "substitutions"
    TIPS = "tips"
    NUTRITION = "nutrition"
    TOTAL_TIME = "total_time"
    SERVES = "serves"
    SERVING_SIZE = "serving_size"

    @property
    def strategy(self) -> SectionStrategy:
        """The extraction strategy used for this section."""
        if self is SectionKind.NUTRITION:
            return SectionStrategy.BLOCK
        if self in (SectionKind.TOTAL_TIME, SectionKind.SERVES, SectionKind.SERVING_SIZE):
            return SectionStrategy.VALUE
        return SectionStrategy.LIST


class SectionBoundaries(BaseModel):
    """Where each recognized section starts within the cleaned lines.

    Attributes:
        lines: The stripped, non-empty lines of the raw text
        title: The recovered title, or None if the text was empty
        title_index: Line index holding the title, or None
        starts: Header line index for every section that was found
    """

    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...] = ()
    title: str | None = None
    title_index: int | None = None
    starts: Annotated[
        Mapping[SectionKind, int], AfterValidator(_read_only), PlainSerializer(dict)
    ] = Field(default_factory=lambda: MappingProxyType({}))

    def found(self, kind: SectionKind) -> bool:
        return kind in self.starts

    def start(self, kind: SectionKind) -> int | None:
        return self.starts.get(kind)

    def end(self, kind: SectionKind) -> int:
        """Index of the next found header after this section, or end of text."""
        start = self.starts.get(kind)
        if start is None:
            return len(self.lines)
        later = [index for index in self.starts.values() if index > start]
        return min(later, default=len(self.lines))


class ParsedRecipe(BaseModel):
    """The canonical structured form of a generated recipe.

    Attributes:
        title: The recipe title
        ingredients: Cleaned "quantity unit name" lines, in order
        instructions: One entry per step, in execution order
        substitutions: Substitution lines, or None if the section is missing
        tips: Cooking tips, or None if the section is missing
        nutrition: The raw nutrition block, newline joined
        servings: Raw "serves" value, e.g. '2-3 people'
        serving_size: Raw serving size value, e.g. '1 cup per serving'
        total_time: Raw total time value, e.g. '30 minutes'
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        default=UNTITLED_RECIPE,
        description="The title of the recipe"
    )
    ingredients: tuple[str, ...] = Field(
        default=(),
        description="Ingredient lines such as '2 cups rice'"
    )
    instructions: tuple[str, ...] = Field(
        default=(),
        description="Instruction steps in execution order"
    )
    substitutions: tuple[str, ...] | None = None
    tips: tuple[str, ...] | None = None
    nutrition: str | None = None
    servings: str | None = None
    serving_size: str | None = None
    total_time: str | None = None


class NutritionFacts(BaseModel):
    """Labeled nutrition values, e.g. {'Calories': '400', 'Protein': '10g'}."""

    model_config = ConfigDict(frozen=True)

    facts: Annotated[
        Mapping[str, str], AfterValidator(_read_only), PlainSerializer(dict)
    ] = Field(default_factory=lambda: MappingProxyType({}))
    note: str | None = None


class TimeFields(BaseModel):
    """Raw prep/cook/total time strings found inside a recipe block."""

    model_config = ConfigDict(frozen=True)

    prep: str | None = None
    cook: str | None = None
    total: str | None = None


class NutritionBlock(BaseModel):
    """Everything the nutrition sub-parser recovers from its block."""

    model_config = ConfigDict(frozen=True)

    facts: NutritionFacts = Field(default_factory=NutritionFacts)
    times: TimeFields = Field(default_factory=TimeFields)


class DerivedFields(BaseModel):
    """Values computed from a parsed recipe, layered on top of it."""

    model_config = ConfigDict(frozen=True)

    prep_minutes: int | None = None
    cook_minutes: int | None = None
    total_minutes: int | None = None
    total_time: str | None = None
    serving_size: str
    calories: str | None = None
    calories_estimated: bool = False
    original_servings: int = 1


class NutritionDisplay(BaseModel):
    """Display-ready nutrition and timing labels; never empty."""

    model_config = ConfigDict(frozen=True)

    calories: str = UNKNOWN_VALUE
    protein: str = UNKNOWN_VALUE
    carbs: str = UNKNOWN_VALUE
    fat: str = UNKNOWN_VALUE
    prep_time: str = UNKNOWN_VALUE
    cook_time: str = UNKNOWN_VALUE
    total_time: str = UNKNOWN_VALUE
    serving_size: str


class ParseResult(BaseModel):
    """A parsed recipe together with its derived view and advisory warning."""

    model_config = ConfigDict(frozen=True)

    recipe: ParsedRecipe
    nutrition: NutritionBlock
    derived: DerivedFields
    display: NutritionDisplay
    warning: str | None = None


class RecipeOptions(BaseModel):
    """User preferences that shape the recipe generation prompt.

    Attributes:
        diet: Diet name, or 'other' to use custom_diet
        quick: Limit prep time to under 20 minutes
        healthy: Ask for healthy recipes only
        cuisine: Cuisine name, or 'other' to use custom_cuisine
        allergens: Comma separated allergens to avoid
        difficulty: 1 (easy) to 5 (hard); 0 leaves it unset
        dish_type: Dish type, or 'other' to use custom_dish_type
    """

    diet: str = ""
    custom_diet: str = ""
    quick: bool = False
    healthy: bool = False
    cuisine: str = "other"
    custom_cuisine: str = ""
    allergens: str = ""
    difficulty: int = Field(default=0, ge=0, le=5)
    dish_type: str = ""
    custom_dish_type: str = ""


class SubstitutionOption(BaseModel):
    """A single replacement for an ingredient."""

    model_config = ConfigDict(frozen=True)

    text: str
    note: str | None = None


class SubstitutionSuggestion(BaseModel):
    """Replacement options suggested for one original ingredient."""

    model_config = ConfigDict(frozen=True)

    ingredient: str
    options: tuple[SubstitutionOption, ...] = ()


class RecipeCard(BaseModel):
    """The final display bundle for a recipe at a chosen serving count."""

    title: str
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    substitutions: list[str] | None = None
    tips: list[str] | None = None
    nutrition: NutritionDisplay
    original_servings: int = 1
    desired_servings: int = 1
    image_url: str | None = None
    warning: str | None = None
