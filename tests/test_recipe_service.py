"""Tests for recipe aggregation."""

import pytest

from nutrition_engine.domain.recipes import (
    HealthScoreRating,
    IngredientUnit,
    MealType,
    NutriScoreGrade,
    Recipe,
)
from nutrition_engine.services.recipes import (
    RecipeService,
    adjusted_nutriments,
    ingredient_score,
    quantity_factor,
    rating_for,
    score_message,
    total_health_score,
    total_nutrition,
)
from tests.conftest import make_ingredient


@pytest.mark.parametrize(
    ("unit", "expected"),
    [
        (IngredientUnit.WHOLE, 1.0),
        (IngredientUnit.GRAM, 0.02),
        (IngredientUnit.CUP, 4.8),
        (IngredientUnit.TBSP, 0.3),
        (IngredientUnit.TSP, 0.1),
        (IngredientUnit.SLICE, 0.6),
        (IngredientUnit.PIECE, 0.5),
    ],
)
def test_quantity_factor_per_unit(unit: IngredientUnit, expected: float) -> None:
    assert quantity_factor(2, unit) == pytest.approx(expected)


def test_adjusted_nutriments_scale_and_default_missing() -> None:
    ingredient = make_ingredient(
        quantity=150,
        unit=IngredientUnit.GRAM,
        nutriments={
            "energy-kcal_100g": 200,
            "proteins_100g": "10",
            "fat_100g": None,
            "sugars_100g": "n/a",
        },
    )

    adjusted = adjusted_nutriments(ingredient)

    assert adjusted.calories == pytest.approx(300)
    assert adjusted.protein == pytest.approx(15)
    assert adjusted.fat == 0.0
    assert adjusted.sugar == 0.0
    assert adjusted.sodium == 0.0


def test_total_nutrition_sums_ingredients() -> None:
    egg = make_ingredient(
        quantity=2,
        unit=IngredientUnit.WHOLE,
        nutriments={"energy-kcal_100g": 155, "proteins_100g": 13},
    )
    toast = make_ingredient(
        quantity=1,
        unit=IngredientUnit.SLICE,
        nutriments={"energy-kcal_100g": 260, "fiber_100g": 6, "sodium_100g": 0.5},
    )

    totals = total_nutrition([egg, toast])

    assert totals.calories == pytest.approx(155 + 78)
    assert totals.protein == pytest.approx(13)
    assert totals.fiber == pytest.approx(1.8)
    assert totals.sodium == pytest.approx(0.15)


def test_single_grade_a_ingredient_is_excellent() -> None:
    ingredient = make_ingredient(NutriScoreGrade.A, quantity=2)

    score = total_health_score([ingredient])

    assert score == 20
    assert rating_for(score) == HealthScoreRating.EXCELLENT


def test_score_rounds_each_term_before_summing() -> None:
    # each term is 10 * 0.5 * 0.5 = 2.5 -> 3; summing first would give 5
    ingredients = [
        make_ingredient(NutriScoreGrade.B, quantity=0.5),
        make_ingredient(NutriScoreGrade.B, quantity=0.5),
    ]

    assert ingredient_score(ingredients[0]) == 3
    assert total_health_score(ingredients) == 6


def test_negative_terms_round_away_from_zero() -> None:
    ingredient = make_ingredient(NutriScoreGrade.D, quantity=0.5)

    assert ingredient_score(ingredient) == -3


def test_grams_use_quantity_not_mass_for_score() -> None:
    ingredient = make_ingredient(
        NutriScoreGrade.E, quantity=3, unit=IngredientUnit.GRAM
    )

    assert ingredient_score(ingredient) == -30


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (20, HealthScoreRating.EXCELLENT),
        (19, HealthScoreRating.GOOD),
        (5, HealthScoreRating.GOOD),
        (4, HealthScoreRating.FAIR),
        (-5, HealthScoreRating.FAIR),
        (-6, HealthScoreRating.POOR),
    ],
)
def test_rating_bands(score: int, expected: HealthScoreRating) -> None:
    assert rating_for(score) == expected


def test_empty_recipe_scores_zero_and_is_fair() -> None:
    analysis = RecipeService().analyze(Recipe(name="Empty", meal_type=MealType.SNACK))

    assert analysis.health_score == 0
    assert analysis.rating == HealthScoreRating.FAIR
    assert analysis.totals.calories == 0.0
    assert analysis.message == "Fair Snack"


def test_score_messages_use_meal_type() -> None:
    assert score_message(25, MealType.BREAKFAST) == "Excellent Breakfast!"
    assert score_message(10, MealType.DINNER) == "Good Dinner!"
    assert score_message(-20, MealType.LUNCH) == "Could be healthier"


def test_analyze_recipe() -> None:
    recipe = Recipe(
        name="Oat bowl",
        meal_type=MealType.BREAKFAST,
        ingredients=[
            make_ingredient(
                NutriScoreGrade.A,
                quantity=1,
                unit=IngredientUnit.CUP,
                nutriments={"energy-kcal_100g": 68, "carbohydrates_100g": 12},
            ),
            make_ingredient(
                NutriScoreGrade.D,
                quantity=1,
                unit=IngredientUnit.TBSP,
                nutriments={"energy-kcal_100g": 304, "sugars_100g": 82},
            ),
        ],
    )

    analysis = RecipeService().analyze(recipe)

    assert analysis.health_score == 10 - 5
    assert analysis.rating == HealthScoreRating.GOOD
    assert analysis.message == "Good Breakfast!"
    assert analysis.totals.calories == pytest.approx(68 * 2.4 + 304 * 0.15)
    assert analysis.totals.sugar == pytest.approx(82 * 0.15)


def test_grade_parsing_defaults_to_neutral() -> None:
    assert NutriScoreGrade.from_string("a") == NutriScoreGrade.A
    assert NutriScoreGrade.from_string(" E ") == NutriScoreGrade.E
    assert NutriScoreGrade.from_string("") == NutriScoreGrade.C
    assert NutriScoreGrade.from_string(None) == NutriScoreGrade.C
    assert NutriScoreGrade.from_string("unknown") == NutriScoreGrade.C
