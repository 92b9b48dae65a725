"""Dietary compliance checks for packaged products."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from nutrition_engine.domain.compliance import ComplianceResult
from nutrition_engine.domain.nutrients import DietaryRestriction

# Satisfied only when a product label declares the diet.
LABEL_RESTRICTIONS = {
    DietaryRestriction.VEGAN: "vegan",
    DietaryRestriction.VEGETARIAN: "vegetarian",
    DietaryRestriction.HALAL: "halal",
    DietaryRestriction.KOSHER: "kosher",
}

# Violated when the allergen list or ingredient text mentions a keyword.
ALLERGEN_KEYWORDS = {
    DietaryRestriction.GLUTEN_FREE: ("gluten", "wheat"),
    DietaryRestriction.DAIRY_FREE: ("milk", "dairy", "lactose"),
    DietaryRestriction.NUT_FREE: ("nut", "almond", "peanut"),
    DietaryRestriction.SOY_FREE: ("soy",),
    DietaryRestriction.EGG_FREE: ("egg",),
    DietaryRestriction.SHELLFISH_FREE: (
        "shellfish",
        "crustacean",
        "shrimp",
        "crab",
        "lobster",
    ),
}

_logger = logging.getLogger(__name__)


@dataclass
class ComplianceService:
    """Classifies active restrictions against product label data."""

    debug: bool = False

    def check_product(
        self,
        labels: Iterable[str],
        allergens: Iterable[str] | None,
        ingredients: str | None,
        restrictions: Iterable[DietaryRestriction],
    ) -> ComplianceResult:
        """Split active restrictions into matches, violations and skipped.

        Restrictions that need nutrient data (low sodium, low sugar) cannot be
        judged from label data and are reported as skipped.
        """
        labels_lower = [label.lower() for label in labels]
        allergens_lower = [allergen.lower() for allergen in allergens or ()]
        ingredients_lower = (ingredients or "").lower()
        active = set(restrictions)

        matches: list[DietaryRestriction] = []
        violations: list[DietaryRestriction] = []
        skipped: list[DietaryRestriction] = []
        for restriction in DietaryRestriction:
            if restriction not in active:
                continue
            violated = _is_violated(
                restriction, labels_lower, allergens_lower, ingredients_lower
            )
            if violated is None:
                skipped.append(restriction)
            elif violated:
                violations.append(restriction)
            else:
                matches.append(restriction)

        if self.debug:
            _logger.info(
                "Compliance check: matches=%s violations=%s skipped=%s",
                [r.tag for r in matches],
                [r.tag for r in violations],
                [r.tag for r in skipped],
            )
        return ComplianceResult(matches=matches, violations=violations, skipped=skipped)


def _is_violated(
    restriction: DietaryRestriction,
    labels: list[str],
    allergens: list[str],
    ingredients: str,
) -> bool | None:
    """Return the verdict for one restriction, or None when it can't be judged."""
    declared = LABEL_RESTRICTIONS.get(restriction)
    if declared is not None:
        return not any(declared in label for label in labels)

    keywords = ALLERGEN_KEYWORDS.get(restriction)
    if keywords is None:
        return None
    in_allergens = any(k in allergen for allergen in allergens for k in keywords)
    return in_allergens or any(k in ingredients for k in keywords)
