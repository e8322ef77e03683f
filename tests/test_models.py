from datetime import date

import pytest
from pydantic import ValidationError

from app.models.field import FarmField, MoistureStatus, moisture_status
from app.models.prediction import PredictionRecord
from app.models.season_plan import PlanStatus, SeasonPlan
from app.models.yield_ai import ExplainRecommendationInput, PredictYieldAIOutput
from app.models.yield_estimation import EstimationRequest
from app.services.yield_estimator import estimate


def test_estimation_request_is_immutable():
    request = EstimationRequest(
        crop="Corn", soil_ph=6.5, rainfall_mm=1000, temperature_c=24, fertilizer_kg_per_ha=0
    )
    with pytest.raises(ValidationError):
        request.crop = "Rice"


def test_estimation_request_accepts_out_of_range_values():
    request = EstimationRequest(
        crop="Cotton", soil_ph=-3, rainfall_mm=9000, temperature_c=70, fertilizer_kg_per_ha=-20
    )
    assert request.rainfall_mm == 9000


def test_estimation_request_rejects_non_finite_values():
    with pytest.raises(ValidationError):
        EstimationRequest(
            crop="Corn",
            soil_ph=float("nan"),
            rainfall_mm=1000,
            temperature_c=24,
            fertilizer_kg_per_ha=0,
        )


def test_estimation_request_accepts_camel_case_aliases():
    request = EstimationRequest.model_validate(
        {
            "crop": "Rice",
            "soilPH": 6.0,
            "rainfallMm": 1100,
            "temperatureC": 27,
            "fertilizerKgPerHa": 80,
        }
    )
    assert request.soil_ph == 6.0
    assert request.fertilizer_kg_per_ha == 80


@pytest.mark.parametrize(
    "level, expected",
    [
        (100, MoistureStatus.OPTIMAL),
        (61, MoistureStatus.OPTIMAL),
        (60, MoistureStatus.MODERATE),
        (41, MoistureStatus.MODERATE),
        (40, MoistureStatus.LOW),
        (0, MoistureStatus.LOW),
    ],
)
def test_moisture_status_buckets(level, expected):
    assert moisture_status(level) == expected


def test_field_round_trips_through_mongo_id():
    field = FarmField(name="North Hill", crop="Corn", lat=34.05, lng=-118.24, moisture=62)
    payload = field.model_dump(mode="json", by_alias=True, exclude_none=True)
    assert payload["_id"] == field.id
    assert FarmField.model_validate(payload).id == field.id


def test_prediction_record_copies_request_fields():
    request = EstimationRequest(
        crop="Wheat", soil_ph=6.8, rainfall_mm=850, temperature_c=22, fertilizer_kg_per_ha=100
    )
    result = estimate(request)
    record = PredictionRecord.from_estimate("user-1", request, result)
    assert record.user_id == "user-1"
    assert record.crop == "Wheat"
    assert record.rainfall_mm == 850
    assert record.predicted_yield == result.predicted_yield
    assert record.confidence_score == result.confidence_score
    assert record.created_at.tzinfo is not None


def test_season_plan_defaults_to_draft():
    plan = SeasonPlan(
        crop="Corn",
        fieldName="North Hill",
        startDate="2026-03-01",
        endDate="2026-08-30",
    )
    assert plan.status == PlanStatus.DRAFT
    assert plan.start_date == date(2026, 3, 1)


def test_season_plan_rejects_end_before_start():
    with pytest.raises(ValidationError):
        SeasonPlan(
            crop="Corn",
            field_name="North Hill",
            start_date="2026-08-30",
            end_date="2026-03-01",
        )


def test_explain_input_requires_matching_details():
    base = {
        "original_crop_type": "Wheat",
        "soil_ph": 6.8,
        "rainfall": 850,
        "temperature": 22,
        "predicted_yield": 3200,
    }
    with pytest.raises(ValidationError):
        ExplainRecommendationInput(recommendation_type="fertilizer", **base)
    with pytest.raises(ValidationError):
        ExplainRecommendationInput(recommendation_type="crop_switch", **base)

    explain = ExplainRecommendationInput(
        recommendation_type="crop_switch",
        crop_switch_recommendation={"alternativeCrop": "Soybeans"},
        **base,
    )
    assert explain.crop_switch_recommendation.alternative_crop == "Soybeans"


def test_predict_yield_ai_output_accepts_yield_key():
    output = PredictYieldAIOutput.model_validate(
        {"yield": 7800, "confidence": 0.91, "reasoning": "Near-optimal pH."}
    )
    assert output.predicted_yield == 7800
