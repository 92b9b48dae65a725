"""Health rating calculator for single menu items."""

from nutrition_engine.domain.nutrients import HealthRating, NutrientProfile

# (upper bound inclusive, points); values above the last bound score -2.
_CALORIE_BANDS = ((400, 2), (600, 1), (800, 0), (1000, -1))
_SODIUM_BANDS = ((400, 2), (700, 1), (1000, 0), (1500, -1))

_RATING_THRESHOLDS = (
    (1.5, HealthRating.A),
    (0.5, HealthRating.B),
    (-0.5, HealthRating.C),
    (-1.5, HealthRating.D),
)


def compute_health_rating(profile: NutrientProfile) -> HealthRating | None:
    """Rate an item from calories, sodium and protein.

    Returns None when calories are unknown. Carbs and fat are accepted on the
    profile but do not contribute.
    """
    if profile.calories is None:
        return None

    score = _band_points(profile.calories, _CALORIE_BANDS)
    factors_considered = 1

    if profile.sodium is not None:
        score += _band_points(profile.sodium, _SODIUM_BANDS)
        factors_considered += 1

    if profile.protein is not None:
        if profile.protein >= 25:
            score += 1
        factors_considered += 1

    average = score / factors_considered
    for threshold, rating in _RATING_THRESHOLDS:
        if average >= threshold:
            return rating
    return HealthRating.E


def _band_points(value: int, bands: tuple[tuple[int, int], ...]) -> int:
    for upper, points in bands:
        if value <= upper:
            return points
    return -2
