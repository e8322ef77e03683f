from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class EstimationRequest(BaseModel):
    """Environmental inputs for a single yield estimate.

    Values are type-checked only. Out-of-range inputs are accepted and simply
    extrapolate; non-finite numbers are rejected at construction.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    crop: str = Field(
        description="Crop label, e.g. Corn, Soybeans, Wheat, Rice or Cotton."
    )
    soil_ph: float = Field(
        description="Soil pH, typically between 4.0 and 9.0.",
        validation_alias=AliasChoices("soil_ph", "soilPH"),
    )
    rainfall_mm: float = Field(
        description="Seasonal rainfall in mm, typically between 0 and 2000.",
        validation_alias=AliasChoices("rainfall_mm", "rainfallMm", "rainfall"),
    )
    temperature_c: float = Field(
        description="Average temperature in Celsius, typically between -10 and 45.",
        validation_alias=AliasChoices("temperature_c", "temperatureC", "temp"),
    )
    fertilizer_kg_per_ha: float = Field(
        description="Applied fertilizer in kg/ha, typically between 0 and 300.",
        validation_alias=AliasChoices(
            "fertilizer_kg_per_ha", "fertilizerKgPerHa", "fertilizer"
        ),
    )


class FeatureImportance(BaseModel):
    model_config = ConfigDict(frozen=True)

    feature: str
    weight: float


class EstimationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    predicted_yield: int = Field(ge=0, description="Predicted yield in kg/ha.")
    confidence_score: float = Field(
        ge=0.85, le=0.98, description="Display confidence, drawn per call."
    )
    feature_importances: List[FeatureImportance] = Field(
        description="Fixed feature weights, sorted by descending weight."
    )
