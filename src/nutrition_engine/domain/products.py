"""Domain models for packaged products."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProductNutriments:
    """Label data for a packaged product."""

    nutriscore_grade: str | None = None
    nutriments: dict[str, object] = field(default_factory=dict)
