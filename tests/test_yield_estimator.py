"""
Tests for the heuristic yield estimator.
"""

import random

import pytest

from app.models.yield_estimation import EstimationRequest
from app.services.yield_estimator import (
    BASE_YIELDS,
    DEFAULT_BASE_YIELD,
    MAX_PREDICTED_YIELD,
    _bounded_yield,
    estimate,
    fertilizer_factor,
    ph_factor,
    rain_factor,
    temperature_factor,
)


def _request(crop="Corn", soil_ph=6.5, rainfall_mm=1000, temperature_c=24, fertilizer=0):
    return EstimationRequest(
        crop=crop,
        soil_ph=soil_ph,
        rainfall_mm=rainfall_mm,
        temperature_c=temperature_c,
        fertilizer_kg_per_ha=fertilizer,
    )


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.mark.parametrize("crop, base", sorted(BASE_YIELDS.items()))
def test_optimum_inputs_return_base_yield(crop, base):
    assert estimate(_request(crop=crop)).predicted_yield == base


def test_corn_at_optimum():
    assert estimate(_request(crop="Corn")).predicted_yield == 8000


def test_unknown_crop_uses_default_base():
    assert estimate(_request(crop="Quinoa")).predicted_yield == DEFAULT_BASE_YIELD == 4000


def test_crop_lookup_is_case_sensitive():
    assert estimate(_request(crop="corn")).predicted_yield == 4000


def test_soybeans_worked_example():
    request = _request(
        crop="Soybeans", soil_ph=7.5, rainfall_mm=1200, temperature_c=20, fertilizer=150
    )
    assert ph_factor(7.5) == pytest.approx(0.85)
    assert rain_factor(1200) == pytest.approx(0.96)
    assert temperature_factor(20) == pytest.approx(0.88)
    assert fertilizer_factor(150) == pytest.approx(1.3)
    # 3500 * 0.85 * 0.96 * 0.88 * 1.3 = 3267.264
    assert estimate(request).predicted_yield == 3267


def test_factors_are_not_clamped_individually():
    assert ph_factor(14) < 0
    assert rain_factor(10000) < 0
    assert temperature_factor(-60) < 0
    assert fertilizer_factor(-1000) < 0


@pytest.mark.parametrize("soil_ph", [-5, 0, 4.0, 6.5, 9.0, 14, 50])
@pytest.mark.parametrize("rainfall_mm", [-500, 0, 1000, 2000, 7000])
@pytest.mark.parametrize("temperature_c", [-60, -10, 24, 45, 80])
@pytest.mark.parametrize("fertilizer", [-1000, 0, 300, 5000])
def test_predicted_yield_is_never_negative(soil_ph, rainfall_mm, temperature_c, fertilizer):
    result = estimate(
        _request(
            soil_ph=soil_ph,
            rainfall_mm=rainfall_mm,
            temperature_c=temperature_c,
            fertilizer=fertilizer,
        )
    )
    assert result.predicted_yield >= 0
    assert isinstance(result.predicted_yield, int)


def test_overflowing_fertilizer_clamps_to_max_yield():
    result = estimate(_request(fertilizer=1e308))
    assert result.predicted_yield == MAX_PREDICTED_YIELD


def test_overflowing_ph_and_rainfall_clamps_to_max_yield():
    # Both factors are hugely negative, so the product overflows to +inf.
    result = estimate(_request(soil_ph=1e308, rainfall_mm=1e308))
    assert result.predicted_yield == MAX_PREDICTED_YIELD


def test_infinite_times_zero_factor_reports_zero():
    # fertilizer -500 makes its factor exactly 0; the pH factor overflows.
    result = estimate(_request(soil_ph=1e308, fertilizer=-500))
    assert result.predicted_yield == 0


@pytest.mark.parametrize(
    "raw_yield, expected",
    [
        (float("nan"), 0),
        (float("-inf"), 0),
        (-0.4, 0),
        (2499.5, 2500),
        (1e300, MAX_PREDICTED_YIELD),
        (float("inf"), MAX_PREDICTED_YIELD),
    ],
)
def test_bounded_yield(raw_yield, expected):
    assert _bounded_yield(raw_yield) == expected


def test_negative_raw_yield_is_floored_to_zero():
    # pH factor is negative, every other factor positive
    assert estimate(_request(soil_ph=14)).predicted_yield == 0


def test_feature_importances_order_and_sum():
    importances = estimate(_request()).feature_importances
    assert [item.feature for item in importances] == [
        "Rainfall",
        "Soil pH",
        "Fertilizer",
        "Temperature",
    ]
    assert [item.weight for item in importances] == [0.35, 0.25, 0.25, 0.15]
    assert sum(item.weight for item in importances) == pytest.approx(1.0)


def test_feature_importances_ignore_inputs():
    first = estimate(_request(crop="Rice", soil_ph=4.2, fertilizer=250))
    second = estimate(_request(crop="Cotton", rainfall_mm=200, temperature_c=40))
    assert first.feature_importances == second.feature_importances


def test_confidence_stays_in_range_over_many_draws():
    rng = random.Random(1234)
    request = _request()
    for _ in range(10_000):
        score = estimate(request, rng=rng).confidence_score
        assert 0.85 <= score <= 0.98


def test_confidence_with_default_generator_stays_in_range():
    request = _request()
    scores = [estimate(request).confidence_score for _ in range(1_000)]
    assert min(scores) >= 0.85
    assert max(scores) <= 0.98


@pytest.mark.parametrize(
    "draw, expected",
    [(0.0, 0.85), (0.5, 0.9), (0.999999, 0.9499999)],
)
def test_confidence_uses_injected_random_source(draw, expected):
    result = estimate(_request(), rng=FixedRandom(draw))
    assert result.confidence_score == pytest.approx(expected)


def test_confidence_is_capped():
    assert estimate(_request(), rng=FixedRandom(2.0)).confidence_score == 0.98


def test_seeded_generator_makes_results_reproducible():
    request = _request(crop="Wheat", soil_ph=5.9, fertilizer=120)
    assert estimate(request, rng=random.Random(7)) == estimate(
        request, rng=random.Random(7)
    )


def test_repeated_calls_agree_on_yield_and_importances():
    request = _request(crop="Rice", soil_ph=6.1, rainfall_mm=1500, temperature_c=30, fertilizer=90)
    first = estimate(request)
    second = estimate(request)
    assert first.predicted_yield == second.predicted_yield
    assert first.feature_importances == second.feature_importances


def test_request_accepts_dashboard_field_names():
    request = EstimationRequest.model_validate(
        {"crop": "Corn", "soilPH": 6.5, "rainfall": 1000, "temp": 24, "fertilizer": 0}
    )
    assert estimate(request).predicted_yield == 8000
