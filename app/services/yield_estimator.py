"""
Heuristic yield estimator.

A crop-specific base yield is scaled by four multiplicative factors, each
centered on an agronomic optimum. Feature importances are fixed display
weights and the confidence score is a random draw, not a quality measure.
"""

import math
import random
from typing import Optional, Protocol

from app.models.yield_estimation import (
    EstimationRequest,
    EstimationResult,
    FeatureImportance,
)

BASE_YIELDS = {
    "Corn": 8000,
    "Soybeans": 3500,
    "Wheat": 3000,
    "Rice": 5000,
    "Cotton": 2000,
}
DEFAULT_BASE_YIELD = 4000

OPTIMAL_SOIL_PH = 6.5
OPTIMAL_RAINFALL_MM = 1000
OPTIMAL_TEMPERATURE_C = 24

# Declaration order breaks ties when sorting.
FEATURE_WEIGHTS = (
    ("Soil pH", 0.25),
    ("Rainfall", 0.35),
    ("Temperature", 0.15),
    ("Fertilizer", 0.25),
)

CONFIDENCE_FLOOR = 0.85
CONFIDENCE_SPAN = 0.1
CONFIDENCE_CEILING = 0.98

# Largest storable yield (BSON int64); larger or overflowing products clamp here.
MAX_PREDICTED_YIELD = 2**63 - 1


class RandomSource(Protocol):
    def random(self) -> float: ...


_default_rng = random.Random()


def base_yield_for(crop: str) -> int:
    return BASE_YIELDS.get(crop, DEFAULT_BASE_YIELD)


def ph_factor(soil_ph: float) -> float:
    return 1 - abs(soil_ph - OPTIMAL_SOIL_PH) * 0.15


def rain_factor(rainfall_mm: float) -> float:
    return 1 - abs(rainfall_mm - OPTIMAL_RAINFALL_MM) * 0.0002


def temperature_factor(temperature_c: float) -> float:
    return 1 - abs(temperature_c - OPTIMAL_TEMPERATURE_C) * 0.03


def fertilizer_factor(fertilizer_kg_per_ha: float) -> float:
    return 1 + (fertilizer_kg_per_ha / 200) * 0.4


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _bounded_yield(raw_yield: float) -> int:
    if math.isnan(raw_yield) or raw_yield <= 0:
        return 0
    if raw_yield >= MAX_PREDICTED_YIELD:
        return MAX_PREDICTED_YIELD
    return _round_half_up(raw_yield)


def feature_importances() -> list[FeatureImportance]:
    ordered = sorted(FEATURE_WEIGHTS, key=lambda item: item[1], reverse=True)
    return [FeatureImportance(feature=name, weight=weight) for name, weight in ordered]


def confidence_score(rng: Optional[RandomSource] = None) -> float:
    rng = rng or _default_rng
    return min(CONFIDENCE_CEILING, CONFIDENCE_FLOOR + rng.random() * CONFIDENCE_SPAN)


def estimate(
    request: EstimationRequest, rng: Optional[RandomSource] = None
) -> EstimationResult:
    """
    Estimate the yield in kg/ha for the given environmental inputs.

    Individual factors are not clamped, so far out-of-range inputs can drive
    the raw product negative; only the final yield is floored at zero. Products at
    or above ``MAX_PREDICTED_YIELD``, overflow to infinity included, are
    clamped to it, and an undefined product (infinity times a zero factor)
    reports zero.

    Args:
        request: Crop label and environmental inputs.
        rng: Source for the confidence draw. Pass a seeded ``random.Random``
            for reproducible output.

    Returns:
        An EstimationResult. Never raises for a valid request.
    """
    raw_yield = (
        base_yield_for(request.crop)
        * ph_factor(request.soil_ph)
        * rain_factor(request.rainfall_mm)
        * temperature_factor(request.temperature_c)
        * fertilizer_factor(request.fertilizer_kg_per_ha)
    )
    return EstimationResult(
        predicted_yield=_bounded_yield(raw_yield),
        confidence_score=confidence_score(rng),
        feature_importances=feature_importances(),
    )
