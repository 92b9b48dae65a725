"""Tests for domain enums and helpers."""

import pytest

from nutrition_engine.domain.dishes import DishRecommendation
from nutrition_engine.domain.nutrients import (
    ALLERGIES,
    DIET_TYPE,
    HEALTH_GOALS,
    DietaryRestriction,
    HealthCondition,
)
from nutrition_engine.domain.recipes import IngredientUnit, MealType
from nutrition_engine.services.keywords import (
    contains_red_meat,
    likely_contains_dairy,
    likely_contains_gluten,
    likely_contains_meat,
)
from nutrition_engine.services.numbers import round_half_away, to_float


def test_condition_tags_round_trip() -> None:
    for condition in HealthCondition:
        assert HealthCondition.from_tag(condition.tag) is condition
    assert HealthCondition.HIGH_BLOOD_PRESSURE.display_name == "High Blood Pressure"


def test_unknown_condition_tag_raises() -> None:
    with pytest.raises(ValueError, match="Unknown health condition"):
        HealthCondition.from_tag("insomnia")


def test_restriction_categories() -> None:
    assert DietaryRestriction.HALAL.category == DIET_TYPE
    assert DietaryRestriction.SHELLFISH_FREE.category == ALLERGIES
    assert DietaryRestriction.LOW_SUGAR.category == HEALTH_GOALS
    assert DietaryRestriction.from_tag("glutenFree") is DietaryRestriction.GLUTEN_FREE


def test_recommendation_parsing_and_order() -> None:
    assert DishRecommendation.from_string("BEST") is DishRecommendation.BEST
    assert DishRecommendation.from_string("avoid") is DishRecommendation.AVOID
    assert DishRecommendation.from_string("maybe") is DishRecommendation.CAUTION
    assert DishRecommendation.BEST.rank < DishRecommendation.AVOID.rank
    assert DishRecommendation.CAUTION.display_name == "Use Caution"


def test_units_and_meal_types() -> None:
    assert IngredientUnit.from_tag("tbsp") is IngredientUnit.TBSP
    assert IngredientUnit.from_tag("handful") is IngredientUnit.WHOLE
    assert IngredientUnit.GRAM.display_name == "g"
    assert MealType.DINNER.display_name == "Dinner"


def test_keyword_predicates_ignore_case() -> None:
    assert likely_contains_gluten("Crispy Tofu")
    assert likely_contains_meat("BBQ Pork Ribs")
    assert likely_contains_dairy("Vanilla Ice Cream")
    assert contains_red_meat("Lamb Kebab")
    assert not likely_contains_meat("Veggie Bowl")
    assert not contains_red_meat("Grilled Salmon")


def test_round_half_away_from_zero() -> None:
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(2.4) == 2
    assert round_half_away(0.0) == 0


def test_to_float_coerces_loose_values() -> None:
    assert to_float(3) == 3.0
    assert to_float("1.5") == 1.5
    assert to_float("") == 0.0
    assert to_float(None) == 0.0
    assert to_float(True) == 0.0


def test_to_float_treats_non_finite_as_zero() -> None:
    assert to_float("nan") == 0.0
    assert to_float("inf") == 0.0
    assert to_float("-inf") == 0.0
    assert to_float("1e400") == 0.0
    assert to_float(float("nan")) == 0.0
