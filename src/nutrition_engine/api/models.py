"""Pydantic models for the scoring API payloads."""

from typing import Literal

from pydantic import BaseModel, Field

from nutrition_engine.domain.compliance import ComplianceResult
from nutrition_engine.domain.dishes import DishAnalysis, MenuAnalysisResult
from nutrition_engine.domain.recipes import RecipeAnalysis

ConditionTag = Literal[
    "diabetes",
    "highBloodPressure",
    "heartDisease",
    "highCholesterol",
    "kidneyDisease",
    "obesity",
    "gout",
]

RestrictionTag = Literal[
    "vegan",
    "vegetarian",
    "halal",
    "kosher",
    "glutenFree",
    "dairyFree",
    "nutFree",
    "soyFree",
    "eggFree",
    "shellfishFree",
    "lowSodium",
    "lowSugar",
]

UnitTag = Literal["whole", "gram", "cup", "tbsp", "tsp", "slice", "piece"]

MealTypeTag = Literal["breakfast", "lunch", "dinner", "snack"]


class NutrientPayload(BaseModel):
    """Nutrient fields; omitted fields are unknown."""

    calories: int | None = None
    protein: int | None = None
    carbs: int | None = None
    fat: int | None = None
    sodium: int | None = None


class MenuItemPayload(NutrientPayload):
    """Menu item with its nutrients."""

    name: str
    description: str | None = None


class MenuAnalysisRequest(BaseModel):
    """Menu items plus the user's active preferences."""

    items: list[MenuItemPayload]
    health_conditions: list[ConditionTag] = Field(default_factory=list)
    dietary_restrictions: list[RestrictionTag] = Field(default_factory=list)
    data_source: str | None = None


class DishAnalysisResponse(BaseModel):
    """Scored dish."""

    name: str
    description: str
    recommendation: str
    reason: str
    score: int
    rating: str | None
    estimated_calories: int
    estimated_protein: int
    estimated_carbs: int
    estimated_fat: int
    estimated_sodium: int
    health_tip: str | None = None

    @classmethod
    def from_domain(cls, dish: DishAnalysis) -> "DishAnalysisResponse":
        return cls(
            name=dish.name,
            description=dish.description,
            recommendation=dish.recommendation.value,
            reason=dish.reason,
            score=dish.score,
            rating=dish.rating.value if dish.rating else None,
            estimated_calories=dish.estimated_calories,
            estimated_protein=dish.estimated_protein,
            estimated_carbs=dish.estimated_carbs,
            estimated_fat=dish.estimated_fat,
            estimated_sodium=dish.estimated_sodium,
            health_tip=dish.health_tip,
        )


class MenuAnalysisResponse(BaseModel):
    """Ranked dishes with summary."""

    dishes: list[DishAnalysisResponse]
    summary: str

    @classmethod
    def from_domain(cls, result: MenuAnalysisResult) -> "MenuAnalysisResponse":
        return cls(
            dishes=[DishAnalysisResponse.from_domain(d) for d in result.dishes],
            summary=result.summary,
        )


class RatingResponse(BaseModel):
    """Health rating letter, or null when calories are unknown."""

    rating: str | None


class ComplianceRequest(BaseModel):
    """Product label data plus active restrictions."""

    labels: list[str] = Field(default_factory=list)
    allergens: list[str] | None = None
    ingredients: str | None = None
    restrictions: list[RestrictionTag] = Field(default_factory=list)


class ComplianceResponse(BaseModel):
    """Restriction tags split by verdict."""

    matches: list[str]
    violations: list[str]
    skipped: list[str]

    @classmethod
    def from_domain(cls, result: ComplianceResult) -> "ComplianceResponse":
        return cls(
            matches=[r.tag for r in result.matches],
            violations=[r.tag for r in result.violations],
            skipped=[r.tag for r in result.skipped],
        )


class IngredientPayload(BaseModel):
    """Recipe ingredient with per-100g nutriments."""

    name: str
    quantity: float
    unit: UnitTag = "whole"
    nutri_score: str | None = None
    nutriments: dict[str, float | str | None] = Field(default_factory=dict)
    category: str = "other"


class RecipeRequest(BaseModel):
    """Recipe to aggregate."""

    name: str = "Recipe"
    meal_type: MealTypeTag = "lunch"
    ingredients: list[IngredientPayload] = Field(default_factory=list)


class NutritionTotalsResponse(BaseModel):
    """Aggregated nutrients."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    sugar: float
    sodium: float


class RecipeResponse(BaseModel):
    """Recipe score and totals."""

    meal_type: str
    health_score: int
    rating: str
    message: str
    totals: NutritionTotalsResponse

    @classmethod
    def from_domain(cls, analysis: RecipeAnalysis) -> "RecipeResponse":
        totals = analysis.totals
        return cls(
            meal_type=analysis.meal_type.value,
            health_score=analysis.health_score,
            rating=analysis.rating.value,
            message=analysis.message,
            totals=NutritionTotalsResponse(
                calories=totals.calories,
                protein=totals.protein,
                carbs=totals.carbs,
                fat=totals.fat,
                fiber=totals.fiber,
                sugar=totals.sugar,
                sodium=totals.sodium,
            ),
        )


class ProductScoreRequest(BaseModel):
    """Packaged product label data."""

    nutriscore_grade: str | None = None
    nutriments: dict[str, float | str | None] = Field(default_factory=dict)


class ProductScoreResponse(BaseModel):
    """Product score in [0, 100]."""

    score: int
