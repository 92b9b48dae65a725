"""Nutrient domain models and user preference tags."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class NutrientProfile:
    """Per-item nutrients; None means unknown, never zero."""

    calories: int | None = None
    protein: int | None = None
    carbs: int | None = None
    fat: int | None = None
    sodium: int | None = None


@dataclass(frozen=True)
class ConditionInfo:
    """Display metadata for a health condition."""

    tag: str
    display_name: str
    description: str


class HealthCondition(Enum):
    """Health conditions a user can opt into."""

    DIABETES = ConditionInfo(
        "diabetes", "Diabetes", "Monitors sugar, carbs, and glycemic impact"
    )
    HIGH_BLOOD_PRESSURE = ConditionInfo(
        "highBloodPressure", "High Blood Pressure", "Monitors sodium and salt content"
    )
    HEART_DISEASE = ConditionInfo(
        "heartDisease", "Heart Disease", "Monitors fats, sodium, and cholesterol"
    )
    HIGH_CHOLESTEROL = ConditionInfo(
        "highCholesterol",
        "High Cholesterol",
        "Monitors saturated fats and cholesterol",
    )
    KIDNEY_DISEASE = ConditionInfo(
        "kidneyDisease", "Kidney Disease", "Monitors sodium, potassium, and phosphorus"
    )
    OBESITY = ConditionInfo(
        "obesity",
        "Obesity / Weight Management",
        "Monitors calories, fats, and sugars",
    )
    GOUT = ConditionInfo("gout", "Gout", "Monitors purines and certain proteins")

    @property
    def tag(self) -> str:
        return self.value.tag

    @property
    def display_name(self) -> str:
        return self.value.display_name

    @classmethod
    def from_tag(cls, tag: str) -> "HealthCondition":
        """Return the condition for a wire tag such as ``highBloodPressure``."""
        for condition in cls:
            if condition.tag == tag:
                return condition
        raise ValueError(f"Unknown health condition: {tag}")


DIET_TYPE = "Diet Type"
ALLERGIES = "Allergies & Intolerances"
HEALTH_GOALS = "Health Goals"


@dataclass(frozen=True)
class RestrictionInfo:
    """Display metadata for a dietary restriction."""

    tag: str
    display_name: str
    category: str


class DietaryRestriction(Enum):
    """Dietary restrictions a user can opt into."""

    VEGAN = RestrictionInfo("vegan", "Vegan", DIET_TYPE)
    VEGETARIAN = RestrictionInfo("vegetarian", "Vegetarian", DIET_TYPE)
    HALAL = RestrictionInfo("halal", "Halal", DIET_TYPE)
    KOSHER = RestrictionInfo("kosher", "Kosher", DIET_TYPE)
    GLUTEN_FREE = RestrictionInfo("glutenFree", "Gluten-Free", ALLERGIES)
    DAIRY_FREE = RestrictionInfo("dairyFree", "Dairy-Free", ALLERGIES)
    NUT_FREE = RestrictionInfo("nutFree", "Nut-Free", ALLERGIES)
    SOY_FREE = RestrictionInfo("soyFree", "Soy-Free", ALLERGIES)
    EGG_FREE = RestrictionInfo("eggFree", "Egg-Free", ALLERGIES)
    SHELLFISH_FREE = RestrictionInfo("shellfishFree", "Shellfish-Free", ALLERGIES)
    LOW_SODIUM = RestrictionInfo("lowSodium", "Low Sodium", HEALTH_GOALS)
    LOW_SUGAR = RestrictionInfo("lowSugar", "Low Sugar", HEALTH_GOALS)

    @property
    def tag(self) -> str:
        return self.value.tag

    @property
    def display_name(self) -> str:
        return self.value.display_name

    @property
    def category(self) -> str:
        return self.value.category

    @classmethod
    def from_tag(cls, tag: str) -> "DietaryRestriction":
        """Return the restriction for a wire tag such as ``glutenFree``."""
        for restriction in cls:
            if restriction.tag == tag:
                return restriction
        raise ValueError(f"Unknown dietary restriction: {tag}")


class HealthRating(Enum):
    """Five-level item rating, A best."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
