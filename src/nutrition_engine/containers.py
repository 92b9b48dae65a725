"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_engine.config import Settings
from nutrition_engine.services.compliance import ComplianceService
from nutrition_engine.services.products import ProductScoringService
from nutrition_engine.services.recipes import RecipeService
from nutrition_engine.services.scoring import DishScoringService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dish_scoring_service: DishScoringService
    compliance_service: ComplianceService
    recipe_service: RecipeService
    product_scoring_service: ProductScoringService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    debug = resolved_settings.debug
    return AppContainer(
        settings=resolved_settings,
        dish_scoring_service=DishScoringService(debug=debug),
        compliance_service=ComplianceService(debug=debug),
        recipe_service=RecipeService(debug=debug),
        product_scoring_service=ProductScoringService(),
    )
