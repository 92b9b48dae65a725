"""Recipe aggregation: unit scaling, nutrient totals and health score."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from nutrition_engine.domain.recipes import (
    HealthScoreRating,
    IngredientUnit,
    MealType,
    NutritionTotals,
    Recipe,
    RecipeAnalysis,
    RecipeIngredient,
)
from nutrition_engine.services.numbers import round_half_away, to_float

# Per-100g nutriment keys as they appear on product labels.
_NUTRIMENT_KEYS = {
    "calories": "energy-kcal_100g",
    "protein": "proteins_100g",
    "carbs": "carbohydrates_100g",
    "fat": "fat_100g",
    "fiber": "fiber_100g",
    "sugar": "sugars_100g",
    "sodium": "sodium_100g",
}

QUANTITY_WEIGHT = 0.5

EXCELLENT_THRESHOLD = 20
GOOD_THRESHOLD = 5
FAIR_THRESHOLD = -5

_logger = logging.getLogger(__name__)


def quantity_factor(quantity: float, unit: IngredientUnit) -> float:
    """Express a quantity as a multiple of the 100g reference portion."""
    if unit is IngredientUnit.GRAM:
        return quantity / 100
    return quantity * unit.value.factor


def adjusted_nutriments(ingredient: RecipeIngredient) -> NutritionTotals:
    """Scale an ingredient's per-100g nutriments to its quantity."""
    factor = quantity_factor(ingredient.quantity, ingredient.unit)
    values = {
        name: to_float(ingredient.nutriments.get(key)) * factor
        for name, key in _NUTRIMENT_KEYS.items()
    }
    return NutritionTotals(**values)


def total_nutrition(ingredients: Iterable[RecipeIngredient]) -> NutritionTotals:
    """Sum adjusted nutriments across ingredients."""
    total = NutritionTotals()
    for ingredient in ingredients:
        adjusted = adjusted_nutriments(ingredient)
        total = NutritionTotals(
            calories=total.calories + adjusted.calories,
            protein=total.protein + adjusted.protein,
            carbs=total.carbs + adjusted.carbs,
            fat=total.fat + adjusted.fat,
            fiber=total.fiber + adjusted.fiber,
            sugar=total.sugar + adjusted.sugar,
            sodium=total.sodium + adjusted.sodium,
        )
    return total


def ingredient_score(ingredient: RecipeIngredient) -> int:
    """Grade weight scaled by quantity, rounded per ingredient."""
    return round_half_away(
        ingredient.nutri_score.weight * ingredient.quantity * QUANTITY_WEIGHT
    )


def total_health_score(ingredients: Iterable[RecipeIngredient]) -> int:
    """Sum of per-ingredient rounded scores; an empty recipe scores 0."""
    return sum(ingredient_score(ingredient) for ingredient in ingredients)


def rating_for(score: int) -> HealthScoreRating:
    if score >= EXCELLENT_THRESHOLD:
        return HealthScoreRating.EXCELLENT
    if score >= GOOD_THRESHOLD:
        return HealthScoreRating.GOOD
    if score >= FAIR_THRESHOLD:
        return HealthScoreRating.FAIR
    return HealthScoreRating.POOR


def score_message(score: int, meal_type: MealType) -> str:
    """Short headline for a recipe score."""
    rating = rating_for(score)
    if rating is HealthScoreRating.EXCELLENT:
        return f"Excellent {meal_type.display_name}!"
    if rating is HealthScoreRating.GOOD:
        return f"Good {meal_type.display_name}!"
    if rating is HealthScoreRating.FAIR:
        return f"Fair {meal_type.display_name}"
    return "Could be healthier"


@dataclass
class RecipeService:
    """Aggregates nutrition and health score for a recipe."""

    debug: bool = False

    def analyze(self, recipe: Recipe) -> RecipeAnalysis:
        """Compute totals, score and rating for a recipe."""
        score = total_health_score(recipe.ingredients)
        analysis = RecipeAnalysis(
            meal_type=recipe.meal_type,
            totals=total_nutrition(recipe.ingredients),
            health_score=score,
            rating=rating_for(score),
            message=score_message(score, recipe.meal_type),
        )
        if self.debug:
            _logger.info(
                "Recipe analyzed: name=%s ingredients=%s score=%s rating=%s",
                recipe.name,
                len(recipe.ingredients),
                score,
                analysis.rating.value,
            )
        return analysis
