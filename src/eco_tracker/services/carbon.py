"""Carbon calculator converting activity amounts into kg CO2e."""

import math

from eco_tracker.domain.activities import ActivityCategory
from eco_tracker.domain.emission_factors import (
    DEFAULT_ELECTRICITY_FACTOR,
    EMISSION_FACTORS,
)
from eco_tracker.domain.errors import ValidationError


def resolve_rate(
    category: ActivityCategory,
    detail: str | None,
    electricity_factor: float = DEFAULT_ELECTRICITY_FACTOR,
) -> float:
    """Return the emission rate for a category and free-text detail."""
    if category is ActivityCategory.ELECTRICITY:
        return electricity_factor
    factors = EMISSION_FACTORS.get(category, EMISSION_FACTORS[ActivityCategory.OTHER])
    return factors.rate_for((detail or "").lower())


def compute_kg(
    category: ActivityCategory,
    detail: str | None,
    amount: float,
    electricity_factor: float = DEFAULT_ELECTRICITY_FACTOR,
) -> float:
    """Return the estimated kg CO2e for an activity.

    The result is not rounded and the sign of ``amount`` is kept as given.
    """
    return amount * resolve_rate(category, detail, electricity_factor)


def parse_amount(raw: object) -> float:
    """Parse user input into a finite amount or raise ``ValidationError``."""
    if raw is None or isinstance(raw, bool):
        raise ValidationError("Enter a valid number")
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise ValidationError("Enter a valid number")
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Enter a valid number") from exc
    if not math.isfinite(value):
        raise ValidationError("Enter a valid number")
    return value
