"""Health score for packaged products."""

from dataclasses import dataclass

from nutrition_engine.domain.products import ProductNutriments
from nutrition_engine.services.numbers import round_half_away, to_float

_GRADE_SCORES = {"a": 100, "b": 75, "c": 50, "d": 25, "e": 0}
_NEUTRAL_SCORE = 50


@dataclass
class ProductScoringService:
    """Scores products from their Nutri-Score grade or label nutriments."""

    def score(self, product: ProductNutriments) -> int:
        """Return a 0-100 score, preferring the printed Nutri-Score grade."""
        grade = (product.nutriscore_grade or "").strip().lower()
        if grade:
            return _GRADE_SCORES.get(grade, _NEUTRAL_SCORE)
        return _score_from_nutriments(product.nutriments)


def _score_from_nutriments(nutriments: dict[str, object]) -> int:
    if not nutriments:
        return _NEUTRAL_SCORE
    sugar = to_float(nutriments.get("sugars_100g"))
    saturated_fat = to_float(nutriments.get("saturated-fat_100g"))
    salt = to_float(nutriments.get("salt_100g"))
    score = 100 - sugar * 2.0 - saturated_fat * 4.0 - salt * 6.0
    return round_half_away(max(0.0, min(100.0, score)))
