"""Dish scoring and recommendation engine.

Each rule inspects one menu item and returns at most one adjustment. Rules are
keyed by the condition or restriction that activates them and are evaluated
in the order they are declared, so the order of notes and concerns in the
reason text is stable.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from nutrition_engine.domain.dishes import (
    DishAnalysis,
    DishRecommendation,
    MenuAnalysisResult,
    MenuItem,
)
from nutrition_engine.domain.nutrients import (
    DietaryRestriction,
    HealthCondition,
    HealthRating,
)
from nutrition_engine.services.keywords import (
    contains_red_meat,
    likely_contains_dairy,
    likely_contains_gluten,
    likely_contains_meat,
)
from nutrition_engine.services.numbers import round_half_away
from nutrition_engine.services.rating import compute_health_rating

DAILY_CALORIE_REFERENCE = 2000
DAILY_SODIUM_REFERENCE = 2300

DISCLAIMER = """IMPORTANT DISCLAIMER

This information is for general reference only and is NOT medical advice.

- Nutrition data is sourced from official restaurant nutrition guides
- Values may vary by location, preparation, and serving size
- Always verify with the restaurant for the most current information
- Consult a healthcare provider or registered dietitian for personalized dietary advice
- Do not use this information to make medical decisions

By using this feature, you acknowledge that the provider is not responsible for dietary decisions made based on this information.
"""

SHORT_DISCLAIMER = (
    "For informational purposes only. Not medical advice. "
    "Verify nutrition info with restaurant."
)

BEST_THRESHOLD = 60
CAUTION_THRESHOLD = 35

_BASE_SCORES = {
    HealthRating.A: 80,
    HealthRating.B: 65,
    HealthRating.C: 50,
    HealthRating.D: 35,
    HealthRating.E: 20,
}
_UNRATED_BASE_SCORE = 50

_PORTION_TIP = "Consider checking portion size or pairing with lower-calorie sides."
_OTHER_OPTIONS_TIP = "You may want to explore other options on the menu."
_LIMITED_DATA = "Limited nutrition data available. Verify with restaurant."

_logger = logging.getLogger(__name__)


class AdjustmentKind(Enum):
    """Severity of an explanatory adjustment."""

    NOTE = "note"
    CONCERN = "concern"


@dataclass(frozen=True)
class Adjustment:
    """Score delta with the text explaining it."""

    kind: AdjustmentKind
    text: str
    delta: int


Rule = Callable[[MenuItem], Adjustment | None]


def _note(text: str, delta: int = 0) -> Adjustment:
    return Adjustment(AdjustmentKind.NOTE, text, delta)


def _concern(text: str, delta: int) -> Adjustment:
    return Adjustment(AdjustmentKind.CONCERN, text, delta)


def _percent_of(value: int, reference: int) -> int:
    return round_half_away(value / reference * 100)


def diabetes_carbs(item: MenuItem) -> Adjustment | None:
    carbs = item.nutrients.carbs
    if carbs is None:
        return None
    if carbs > 60:
        return _concern(f"Higher carbohydrate content ({carbs}g)", -15)
    if carbs > 45:
        return _note(f"Contains {carbs}g carbohydrates", -5)
    if carbs < 30:
        return _note(f"Lower carbohydrate option ({carbs}g)", 5)
    return None


def blood_pressure_sodium(item: MenuItem) -> Adjustment | None:
    sodium = item.nutrients.sodium
    if sodium is None:
        return None
    percent = _percent_of(sodium, DAILY_SODIUM_REFERENCE)
    if sodium > 1000:
        return _concern(
            f"Higher sodium ({sodium} mg, {percent}% daily reference)", -20
        )
    if sodium > 700:
        return _note(f"Contains {sodium} mg sodium ({percent}% daily reference)", -10)
    if sodium < 400:
        return _note(f"Lower sodium option ({sodium} mg)", 5)
    return None


def heart_sodium(item: MenuItem) -> Adjustment | None:
    sodium = item.nutrients.sodium
    if sodium is not None and sodium > 800:
        return _concern(f"Higher sodium content ({sodium} mg)", -10)
    return None


def heart_fat(item: MenuItem) -> Adjustment | None:
    fat = item.nutrients.fat
    if fat is not None and fat > 30:
        return _concern(f"Higher fat content ({fat}g)", -10)
    return None


def cholesterol_fat(item: MenuItem) -> Adjustment | None:
    fat = item.nutrients.fat
    if fat is not None and fat > 25:
        return _concern(f"Higher fat content ({fat}g)", -15)
    return None


def kidney_sodium(item: MenuItem) -> Adjustment | None:
    sodium = item.nutrients.sodium
    if sodium is not None and sodium > 600:
        return _concern(f"Higher sodium ({sodium} mg)", -10)
    return None


def kidney_protein(item: MenuItem) -> Adjustment | None:
    protein = item.nutrients.protein
    if protein is not None and protein > 30:
        return _note(f"Higher protein content ({protein}g)", -5)
    return None


def obesity_calories(item: MenuItem) -> Adjustment | None:
    calories = item.nutrients.calories
    if calories is None:
        return None
    percent = _percent_of(calories, DAILY_CALORIE_REFERENCE)
    if calories > 800:
        return _concern(
            f"Higher calorie content ({calories} kcal, {percent}% daily reference)",
            -20,
        )
    if calories > 600:
        return _note(f"Contains {calories} kcal ({percent}% daily reference)", -10)
    protein = item.nutrients.protein
    if calories < 400 and protein is not None and protein > 15:
        return _note(f"Lower calorie option with protein ({calories} kcal)", 10)
    return None


def gout_red_meat(item: MenuItem) -> Adjustment | None:
    if contains_red_meat(item.name):
        return _note("Contains red meat", -10)
    return None


def gluten(item: MenuItem) -> Adjustment | None:
    if likely_contains_gluten(item.name):
        return _concern("May contain gluten - verify with restaurant", -25)
    return None


def meat(item: MenuItem) -> Adjustment | None:
    if likely_contains_meat(item.name):
        return _concern("Appears to contain meat - verify with restaurant", -30)
    return None


def vegan_dairy(item: MenuItem) -> Adjustment | None:
    if likely_contains_dairy(item.name):
        return _concern("May contain dairy - verify with restaurant", -25)
    return None


def dairy_free(item: MenuItem) -> Adjustment | None:
    if likely_contains_dairy(item.name):
        return _concern("May contain dairy - verify with restaurant", -20)
    return None


def low_sodium(item: MenuItem) -> Adjustment | None:
    sodium = item.nutrients.sodium
    if sodium is not None and sodium > 600:
        return _concern(f"Higher sodium content ({sodium} mg)", -15)
    return None


CONDITION_RULES: tuple[tuple[HealthCondition, Rule], ...] = (
    (HealthCondition.DIABETES, diabetes_carbs),
    (HealthCondition.HIGH_BLOOD_PRESSURE, blood_pressure_sodium),
    (HealthCondition.HEART_DISEASE, heart_sodium),
    (HealthCondition.HEART_DISEASE, heart_fat),
    (HealthCondition.HIGH_CHOLESTEROL, cholesterol_fat),
    (HealthCondition.KIDNEY_DISEASE, kidney_sodium),
    (HealthCondition.KIDNEY_DISEASE, kidney_protein),
    (HealthCondition.OBESITY, obesity_calories),
    (HealthCondition.GOUT, gout_red_meat),
)

# A rule fires when any of its restrictions is active.
RESTRICTION_RULES: tuple[tuple[frozenset[DietaryRestriction], Rule], ...] = (
    (frozenset({DietaryRestriction.GLUTEN_FREE}), gluten),
    (
        frozenset({DietaryRestriction.VEGETARIAN, DietaryRestriction.VEGAN}),
        meat,
    ),
    (frozenset({DietaryRestriction.VEGAN}), vegan_dairy),
    (frozenset({DietaryRestriction.DAIRY_FREE}), dairy_free),
    (frozenset({DietaryRestriction.LOW_SODIUM}), low_sodium),
)


def collect_adjustments(
    item: MenuItem,
    conditions: set[HealthCondition] | frozenset[HealthCondition],
    restrictions: set[DietaryRestriction] | frozenset[DietaryRestriction],
) -> list[Adjustment]:
    """Run every active rule against an item, in declaration order."""
    adjustments: list[Adjustment] = []
    for condition, rule in CONDITION_RULES:
        if condition in conditions:
            _append(adjustments, rule(item))
    for triggers, rule in RESTRICTION_RULES:
        if triggers & restrictions:
            _append(adjustments, rule(item))

    protein = item.nutrients.protein
    has_concern = any(a.kind is AdjustmentKind.CONCERN for a in adjustments)
    if protein is not None and protein > 25 and not has_concern:
        adjustments.append(_note(f"Good protein source ({protein}g)"))
    return adjustments


def _append(adjustments: list[Adjustment], adjustment: Adjustment | None) -> None:
    if adjustment is not None:
        adjustments.append(adjustment)


def base_score(rating: HealthRating | None) -> int:
    """Starting score for a rating; unrated items start neutral."""
    if rating is None:
        return _UNRATED_BASE_SCORE
    return _BASE_SCORES[rating]


def clamp_score(score: int) -> int:
    return max(0, min(100, score))


def recommendation_for(score: int) -> DishRecommendation:
    """Map a clamped score onto a recommendation tier."""
    if score >= BEST_THRESHOLD:
        return DishRecommendation.BEST
    if score >= CAUTION_THRESHOLD:
        return DishRecommendation.CAUTION
    return DishRecommendation.AVOID


@dataclass
class DishScoringService:
    """Scores menu items against a user's conditions and restrictions."""

    debug: bool = False

    def analyze_item(
        self,
        item: MenuItem,
        conditions: Iterable[HealthCondition],
        restrictions: Iterable[DietaryRestriction],
        data_source: str | None = None,
    ) -> DishAnalysis:
        """Score one item and explain the result."""
        nutrients = item.nutrients
        rating = compute_health_rating(nutrients)
        adjustments = collect_adjustments(
            item, frozenset(conditions), frozenset(restrictions)
        )
        score = clamp_score(base_score(rating) + sum(a.delta for a in adjustments))
        recommendation = recommendation_for(score)

        concerns = [a.text for a in adjustments if a.kind is AdjustmentKind.CONCERN]
        notes = [a.text for a in adjustments if a.kind is AdjustmentKind.NOTE]

        description = item.description or ""
        if data_source is not None:
            description = f"{description}\n[Source: {data_source}]".strip()

        if self.debug:
            _logger.info(
                "Scored dish: name=%s rating=%s score=%s recommendation=%s",
                item.name,
                rating.value if rating else None,
                score,
                recommendation.value,
            )

        return DishAnalysis(
            name=item.name,
            description=description,
            recommendation=recommendation,
            reason=_build_reason(rating, concerns, notes, item),
            score=score,
            rating=rating,
            estimated_calories=nutrients.calories or 0,
            estimated_protein=nutrients.protein or 0,
            estimated_carbs=nutrients.carbs or 0,
            estimated_fat=nutrients.fat or 0,
            estimated_sodium=nutrients.sodium or 0,
            health_tip=_build_tip(recommendation, concerns, notes),
        )

    def analyze_menu_items(
        self,
        items: Iterable[MenuItem],
        conditions: Iterable[HealthCondition],
        restrictions: Iterable[DietaryRestriction],
        data_source: str | None = None,
    ) -> MenuAnalysisResult:
        """Score every item and rank the results best to avoid."""
        active_conditions = frozenset(conditions)
        active_restrictions = frozenset(restrictions)
        dishes = [
            self.analyze_item(item, active_conditions, active_restrictions, data_source)
            for item in items
        ]
        dishes.sort(key=lambda dish: dish.recommendation.rank)
        return MenuAnalysisResult(dishes=dishes, summary=_build_summary(dishes))


def _build_reason(
    rating: HealthRating | None,
    concerns: list[str],
    notes: list[str],
    item: MenuItem,
) -> str:
    if rating is not None:
        prefix = f"Rating: {rating.value}"
    else:
        prefix = "Rating: N/A (insufficient data)"

    if concerns:
        return f"{prefix}. {'. '.join(concerns[:2])}"
    if notes:
        return f"{prefix}. {'. '.join(notes[:2])}"
    calories = item.nutrients.calories
    if calories is not None:
        protein = item.nutrients.protein
        protein_text = f", {protein}g protein" if protein is not None else ""
        return f"{prefix}. {calories} kcal{protein_text}."
    return f"{prefix}. {_LIMITED_DATA}"


def _build_tip(
    recommendation: DishRecommendation, concerns: list[str], notes: list[str]
) -> str | None:
    if concerns and notes:
        return notes[0]
    if recommendation is DishRecommendation.CAUTION:
        return _PORTION_TIP
    if recommendation is DishRecommendation.AVOID and concerns:
        return _OTHER_OPTIONS_TIP
    return None


def _build_summary(dishes: list[DishAnalysis]) -> str:
    best = sum(1 for d in dishes if d.recommendation is DishRecommendation.BEST)
    caution = sum(1 for d in dishes if d.recommendation is DishRecommendation.CAUTION)
    avoid = sum(1 for d in dishes if d.recommendation is DishRecommendation.AVOID)

    if avoid:
        summary = (
            f"Based on your preferences, {avoid} item(s) may not align with "
            "your goals. "
        )
    elif caution:
        summary = f"{caution} item(s) have higher values in some nutrients. "
    else:
        summary = "These items generally align with your selected preferences. "

    if best:
        summary += f"{best} item(s) are lower in nutrients you're watching."

    return f"{summary}\n\n{SHORT_DISCLAIMER}"
