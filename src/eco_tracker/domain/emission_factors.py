"""Emission factors in kg CO2e per unit of activity amount.

Units are implied by category: km for transport, kWh for electricity,
liters for water and kg for recycling and food.
"""

from dataclasses import dataclass

from eco_tracker.domain.activities import ActivityCategory

DEFAULT_ELECTRICITY_FACTOR = 0.475


@dataclass(frozen=True)
class KeywordRule:
    """Rate applied when any keyword occurs in the lower-cased detail."""

    keywords: tuple[str, ...]
    rate: float

    def matches(self, detail: str) -> bool:
        """Return true when the detail contains one of the keywords."""
        return any(keyword in detail for keyword in self.keywords)


@dataclass(frozen=True)
class CategoryFactors:
    """Ordered keyword rules with a fallback rate. First match wins."""

    rules: tuple[KeywordRule, ...]
    default_rate: float

    def rate_for(self, detail: str) -> float:
        """Return the rate for an already lower-cased detail."""
        for rule in self.rules:
            if rule.matches(detail):
                return rule.rate
        return self.default_rate


# ELECTRICITY is absent: its rate is supplied by the caller.
EMISSION_FACTORS: dict[ActivityCategory, CategoryFactors] = {
    ActivityCategory.TRANSPORT: CategoryFactors(
        rules=(
            KeywordRule(("car",), 0.21),
            KeywordRule(("bus",), 0.089),
            KeywordRule(("train",), 0.041),
            KeywordRule(("bike", "walk"), 0.0),
        ),
        default_rate=0.18,
    ),
    ActivityCategory.WATER: CategoryFactors(rules=(), default_rate=0.001),
    ActivityCategory.RECYCLING: CategoryFactors(
        rules=(
            KeywordRule(("plastic",), -0.02),
            KeywordRule(("paper",), -0.03),
            KeywordRule(("glass",), -0.01),
        ),
        default_rate=-0.015,
    ),
    ActivityCategory.FOOD: CategoryFactors(
        rules=(
            KeywordRule(("beef",), 27.0),
            KeywordRule(("lamb",), 39.2),
            KeywordRule(("chicken",), 6.9),
            KeywordRule(("veg",), 2.0),
        ),
        default_rate=4.0,
    ),
    ActivityCategory.OTHER: CategoryFactors(rules=(), default_rate=1.0),
}
