"""Domain models for user-assembled recipes."""

from dataclasses import dataclass, field
from enum import Enum


class NutriScoreGrade(Enum):
    """Ingredient grade with its numeric recipe weight."""

    A = 20
    B = 10
    C = 0
    D = -10
    E = -20

    @property
    def weight(self) -> int:
        return self.value

    @classmethod
    def from_string(cls, grade: str | None) -> "NutriScoreGrade":
        """Parse a grade letter; empty or unknown grades are neutral (C)."""
        if not grade:
            return cls.C
        return cls.__members__.get(grade.strip().upper(), cls.C)


@dataclass(frozen=True)
class UnitInfo:
    """Display name and 100g-equivalent multiplier for a unit."""

    tag: str
    display_name: str
    factor: float


class IngredientUnit(Enum):
    """Quantity units with their per-100g scaling factor."""

    WHOLE = UnitInfo("whole", "Whole", 0.5)
    GRAM = UnitInfo("gram", "g", 0.01)
    CUP = UnitInfo("cup", "Cup", 2.4)
    TBSP = UnitInfo("tbsp", "Tbsp", 0.15)
    TSP = UnitInfo("tsp", "Tsp", 0.05)
    SLICE = UnitInfo("slice", "Slice", 0.3)
    PIECE = UnitInfo("piece", "Piece", 0.25)

    @property
    def tag(self) -> str:
        return self.value.tag

    @property
    def display_name(self) -> str:
        return self.value.display_name

    @classmethod
    def from_tag(cls, tag: str) -> "IngredientUnit":
        """Return the unit for a wire tag; unknown tags fall back to whole."""
        for unit in cls:
            if unit.tag == tag:
                return unit
        return cls.WHOLE


class MealType(Enum):
    """Meal classification for a recipe."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class HealthScoreRating(Enum):
    """Four-tier band for a recipe health score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def display_name(self) -> str:
        return _SCORE_RATING_NAMES[self]


_SCORE_RATING_NAMES = {
    HealthScoreRating.EXCELLENT: "Excellent!",
    HealthScoreRating.GOOD: "Good",
    HealthScoreRating.FAIR: "Fair",
    HealthScoreRating.POOR: "Poor",
}


@dataclass(frozen=True)
class RecipeIngredient:
    """Ingredient in a recipe; nutriments are per-100g values."""

    name: str
    quantity: float
    unit: IngredientUnit
    nutri_score: NutriScoreGrade = NutriScoreGrade.C
    nutriments: dict[str, object] = field(default_factory=dict)
    category: str = "other"


@dataclass(frozen=True)
class Recipe:
    """Ordered ingredients with a meal classification."""

    name: str
    meal_type: MealType
    ingredients: list[RecipeIngredient] = field(default_factory=list)


@dataclass(frozen=True)
class NutritionTotals:
    """Quantity-adjusted nutrient amounts."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0


@dataclass(frozen=True)
class RecipeAnalysis:
    """Aggregate nutrition and health band for a recipe."""

    meal_type: MealType
    totals: NutritionTotals
    health_score: int
    rating: HealthScoreRating
    message: str
