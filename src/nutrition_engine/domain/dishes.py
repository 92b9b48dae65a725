"""Domain models for menu dishes and their analysis."""

from dataclasses import dataclass
from enum import Enum

from nutrition_engine.domain.nutrients import HealthRating, NutrientProfile


@dataclass(frozen=True)
class MenuItem:
    """Restaurant menu item with verified nutrition data."""

    name: str
    nutrients: NutrientProfile = NutrientProfile()
    description: str | None = None


class DishRecommendation(Enum):
    """Public-facing recommendation tier."""

    BEST = "best"
    CAUTION = "caution"
    AVOID = "avoid"

    @property
    def display_name(self) -> str:
        return _RECOMMENDATION_NAMES[self]

    @property
    def rank(self) -> int:
        """Sort position, best first."""
        return _RECOMMENDATION_ORDER.index(self)

    @classmethod
    def from_string(cls, value: str) -> "DishRecommendation":
        """Parse a tier name; anything unrecognised is treated as caution."""
        cleaned = value.strip().lower()
        if cleaned == "best":
            return cls.BEST
        if cleaned == "avoid":
            return cls.AVOID
        return cls.CAUTION


_RECOMMENDATION_ORDER = (
    DishRecommendation.BEST,
    DishRecommendation.CAUTION,
    DishRecommendation.AVOID,
)

_RECOMMENDATION_NAMES = {
    DishRecommendation.BEST: "Best Choice",
    DishRecommendation.CAUTION: "Use Caution",
    DishRecommendation.AVOID: "Avoid",
}


@dataclass(frozen=True)
class DishAnalysis:
    """Scored analysis of a single dish."""

    name: str
    description: str
    recommendation: DishRecommendation
    reason: str
    score: int
    rating: HealthRating | None
    estimated_calories: int
    estimated_protein: int
    estimated_carbs: int
    estimated_fat: int
    estimated_sodium: int
    health_tip: str | None = None


@dataclass(frozen=True)
class MenuAnalysisResult:
    """Ranked dish analyses with a summary sentence."""

    dishes: list[DishAnalysis]
    summary: str

    @property
    def best_choices(self) -> list[DishAnalysis]:
        return self._with(DishRecommendation.BEST)

    @property
    def caution_choices(self) -> list[DishAnalysis]:
        return self._with(DishRecommendation.CAUTION)

    @property
    def avoid_choices(self) -> list[DishAnalysis]:
        return self._with(DishRecommendation.AVOID)

    def _with(self, recommendation: DishRecommendation) -> list[DishAnalysis]:
        return [dish for dish in self.dishes if dish.recommendation == recommendation]
