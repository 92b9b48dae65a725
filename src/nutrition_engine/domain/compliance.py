"""Domain models for dietary compliance checks."""

from dataclasses import dataclass

from nutrition_engine.domain.nutrients import DietaryRestriction


@dataclass(frozen=True)
class ComplianceResult:
    """Matched, violated and unjudged restrictions for a product."""

    matches: list[DietaryRestriction]
    violations: list[DietaryRestriction]
    skipped: list[DietaryRestriction]

    @property
    def compliant(self) -> bool:
        return not self.violations
