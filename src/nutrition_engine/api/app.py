"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request

from nutrition_engine.api.models import (
    ComplianceRequest,
    ComplianceResponse,
    IngredientPayload,
    MenuAnalysisRequest,
    MenuAnalysisResponse,
    MenuItemPayload,
    NutrientPayload,
    ProductScoreRequest,
    ProductScoreResponse,
    RatingResponse,
    RecipeRequest,
    RecipeResponse,
)
from nutrition_engine.app_logging import configure_logging
from nutrition_engine.config import parse_data_source
from nutrition_engine.containers import AppContainer
from nutrition_engine.domain.dishes import MenuItem
from nutrition_engine.domain.nutrients import (
    DietaryRestriction,
    HealthCondition,
    NutrientProfile,
)
from nutrition_engine.domain.products import ProductNutriments
from nutrition_engine.domain.recipes import (
    IngredientUnit,
    MealType,
    NutriScoreGrade,
    Recipe,
    RecipeIngredient,
)
from nutrition_engine.services.rating import compute_health_rating
from nutrition_engine.services.scoring import DISCLAIMER, SHORT_DISCLAIMER


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    default_data_source = parse_data_source(container.settings.default_data_source)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/disclaimer")
    async def disclaimer() -> dict[str, str]:
        """Disclaimers that must be shown next to any rating."""
        return {"disclaimer": DISCLAIMER, "short_disclaimer": SHORT_DISCLAIMER}

    @app.post("/ratings")
    async def rate(payload: NutrientPayload) -> RatingResponse:
        """Rate a single nutrient profile."""
        rating = compute_health_rating(_to_profile(payload))
        return RatingResponse(rating=rating.value if rating else None)

    @app.post("/menu/analyze")
    async def analyze_menu(
        payload: MenuAnalysisRequest, request: Request
    ) -> MenuAnalysisResponse:
        """Score and rank menu items for the user's preferences."""
        state_container: AppContainer = request.app.state.container
        data_source = parse_data_source(payload.data_source) or default_data_source
        result = state_container.dish_scoring_service.analyze_menu_items(
            items=[_to_menu_item(item) for item in payload.items],
            conditions={HealthCondition.from_tag(t) for t in payload.health_conditions},
            restrictions={
                DietaryRestriction.from_tag(t) for t in payload.dietary_restrictions
            },
            data_source=data_source,
        )
        logger.info(
            "Menu analyzed: items=%s best=%s avoid=%s",
            len(result.dishes),
            len(result.best_choices),
            len(result.avoid_choices),
        )
        return MenuAnalysisResponse.from_domain(result)

    @app.post("/compliance/check")
    async def check_compliance(
        payload: ComplianceRequest, request: Request
    ) -> ComplianceResponse:
        """Classify restrictions against product label data."""
        state_container: AppContainer = request.app.state.container
        result = state_container.compliance_service.check_product(
            labels=payload.labels,
            allergens=payload.allergens,
            ingredients=payload.ingredients,
            restrictions=[DietaryRestriction.from_tag(t) for t in payload.restrictions],
        )
        return ComplianceResponse.from_domain(result)

    @app.post("/recipes/analyze")
    async def analyze_recipe(payload: RecipeRequest, request: Request) -> RecipeResponse:
        """Aggregate recipe nutrition and health score."""
        state_container: AppContainer = request.app.state.container
        recipe = Recipe(
            name=payload.name,
            meal_type=MealType(payload.meal_type),
            ingredients=[_to_ingredient(item) for item in payload.ingredients],
        )
        analysis = state_container.recipe_service.analyze(recipe)
        return RecipeResponse.from_domain(analysis)

    @app.post("/products/score")
    async def score_product(
        payload: ProductScoreRequest, request: Request
    ) -> ProductScoreResponse:
        """Score a packaged product."""
        state_container: AppContainer = request.app.state.container
        product = ProductNutriments(
            nutriscore_grade=payload.nutriscore_grade,
            nutriments=dict(payload.nutriments),
        )
        return ProductScoreResponse(
            score=state_container.product_scoring_service.score(product)
        )

    return app


def _to_profile(payload: NutrientPayload) -> NutrientProfile:
    return NutrientProfile(
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fat=payload.fat,
        sodium=payload.sodium,
    )


def _to_menu_item(payload: MenuItemPayload) -> MenuItem:
    return MenuItem(
        name=payload.name,
        nutrients=_to_profile(payload),
        description=payload.description,
    )


def _to_ingredient(payload: IngredientPayload) -> RecipeIngredient:
    return RecipeIngredient(
        name=payload.name,
        quantity=payload.quantity,
        unit=IngredientUnit.from_tag(payload.unit),
        nutri_score=NutriScoreGrade.from_string(payload.nutri_score),
        nutriments=dict(payload.nutriments),
        category=payload.category,
    )
