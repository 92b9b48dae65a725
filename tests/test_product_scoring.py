"""Tests for packaged product scoring."""

import pytest

from nutrition_engine.domain.products import ProductNutriments
from nutrition_engine.services.products import ProductScoringService


@pytest.mark.parametrize(
    ("grade", "expected"),
    [("a", 100), ("B", 75), ("c", 50), ("d", 25), ("e", 0), ("z", 50)],
)
def test_grade_maps_to_score(grade: str, expected: int) -> None:
    product = ProductNutriments(nutriscore_grade=grade)

    assert ProductScoringService().score(product) == expected


def test_grade_wins_over_nutriments() -> None:
    product = ProductNutriments(
        nutriscore_grade="a", nutriments={"sugars_100g": 60, "salt_100g": 3}
    )

    assert ProductScoringService().score(product) == 100


def test_no_data_is_neutral() -> None:
    assert ProductScoringService().score(ProductNutriments()) == 50


def test_heuristic_penalises_sugar_fat_and_salt() -> None:
    product = ProductNutriments(
        nutriments={
            "sugars_100g": 10,
            "saturated-fat_100g": "2.5",
            "salt_100g": 1.25,
        }
    )

    # 100 - 20 - 10 - 7.5 = 62.5 -> 63
    assert ProductScoringService().score(product) == 63


def test_heuristic_is_clamped() -> None:
    product = ProductNutriments(nutriments={"sugars_100g": 70})

    assert ProductScoringService().score(product) == 0


@pytest.mark.parametrize("junk", ["nan", "inf", "1e400", float("nan")])
def test_non_finite_nutriments_count_as_zero(junk: object) -> None:
    product = ProductNutriments(nutriments={"sugars_100g": junk, "salt_100g": 5})

    # 100 - 0 - 0 - 30
    assert ProductScoringService().score(product) == 70
