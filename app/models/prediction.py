from datetime import datetime, timezone
from typing import List
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field

from .yield_estimation import EstimationRequest, EstimationResult, FeatureImportance


class PredictionRecord(BaseModel):
    """A saved estimate: request fields verbatim plus the estimator output."""

    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    user_id: str
    crop: str
    soil_ph: float
    rainfall_mm: float
    temperature_c: float
    fertilizer_kg_per_ha: float
    predicted_yield: int = Field(ge=0)
    confidence_score: float
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_estimate(
        cls, user_id: str, request: EstimationRequest, result: EstimationResult
    ) -> "PredictionRecord":
        return cls(
            user_id=user_id,
            predicted_yield=result.predicted_yield,
            confidence_score=result.confidence_score,
            **request.model_dump(),
        )


class PredictionResponse(PredictionRecord):
    feature_importances: List[FeatureImportance]
