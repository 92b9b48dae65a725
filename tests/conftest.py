"""Shared test fixtures."""

import pytest

from nutrition_engine.config import Settings
from nutrition_engine.containers import AppContainer, build_container
from nutrition_engine.domain.dishes import MenuItem
from nutrition_engine.domain.nutrients import NutrientProfile
from nutrition_engine.domain.recipes import (
    IngredientUnit,
    NutriScoreGrade,
    RecipeIngredient,
)


def make_item(name: str = "Garden Salad", **nutrients: int) -> MenuItem:
    """Build a menu item with only the given nutrient fields known."""
    return MenuItem(name=name, nutrients=NutrientProfile(**nutrients))


def make_ingredient(
    grade: NutriScoreGrade = NutriScoreGrade.C,
    quantity: float = 1,
    unit: IngredientUnit = IngredientUnit.WHOLE,
    nutriments: dict[str, object] | None = None,
    name: str = "ingredient",
) -> RecipeIngredient:
    return RecipeIngredient(
        name=name,
        quantity=quantity,
        unit=unit,
        nutri_score=grade,
        nutriments=nutriments or {},
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", default_data_source=None)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
