from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

SYNTHETIC_DATA_COLUMNS = ["soil_ph", "rainfall", "temp", "fertilizer", "crop", "yield"]


class AnalyzeYieldInput(BaseModel):
    crop: str = Field(description="The type of crop.")
    soil_ph: float = Field(
        description="The soil pH level.",
        validation_alias=AliasChoices("soil_ph", "soilPH"),
    )
    rainfall: float = Field(description="The rainfall in mm.")
    temp: float = Field(description="The temperature in Celsius.")
    predicted_yield: float = Field(
        description="The calculated yield value.",
        validation_alias=AliasChoices("predicted_yield", "predictedYield"),
    )


class AnalyzeYieldOutput(BaseModel):
    insight: str = Field(
        description="A smart agricultural insight about the current conditions."
    )
    recommendation: str = Field(
        description="A specific recommendation to optimize the yield."
    )


class RecommendationType(str, Enum):
    FERTILIZER = "fertilizer"
    CROP_SWITCH = "crop_switch"


class FertilizerRecommendation(BaseModel):
    quantity: str = Field(
        description="The recommended fertilizer quantity (e.g., '10kg/hectare nitrogen')."
    )


class CropSwitchRecommendation(BaseModel):
    alternative_crop: str = Field(
        description="The suggested alternative crop (e.g., 'corn', 'soybeans').",
        validation_alias=AliasChoices("alternative_crop", "alternativeCrop"),
    )


class ExplainRecommendationInput(BaseModel):
    recommendation_type: RecommendationType
    fertilizer_recommendation: Optional[FertilizerRecommendation] = None
    crop_switch_recommendation: Optional[CropSwitchRecommendation] = None
    original_crop_type: str = Field(
        description="The original or currently considered crop type."
    )
    soil_ph: float = Field(validation_alias=AliasChoices("soil_ph", "soilPH"))
    rainfall: float = Field(description="The current or predicted rainfall in mm.")
    temperature: float = Field(
        description="The current or predicted temperature in Celsius."
    )
    predicted_yield: float = Field(
        description="Predicted yield in kg/hectare with the original crop."
    )
    reasoning_context: Optional[str] = Field(
        default=None,
        description="Additional reasons from the yield prediction that support the recommendation.",
    )

    @model_validator(mode="after")
    def _check_recommendation_details(self):
        if (
            self.recommendation_type == RecommendationType.FERTILIZER
            and self.fertilizer_recommendation is None
        ):
            raise ValueError(
                "fertilizer_recommendation is required for a fertilizer recommendation"
            )
        if (
            self.recommendation_type == RecommendationType.CROP_SWITCH
            and self.crop_switch_recommendation is None
        ):
            raise ValueError(
                "crop_switch_recommendation is required for a crop_switch recommendation"
            )
        return self


class ExplainRecommendationOutput(BaseModel):
    explanation: str = Field(
        description="A clear, AI-generated explanation for the recommendation."
    )


class SyntheticCropDataInput(BaseModel):
    existing_crop_data: str = Field(
        description="Existing crop yield data in CSV format including headers."
    )
    num_records: int = Field(
        gt=0, description="The number of synthetic crop yield records to generate."
    )


class SyntheticCropDataOutput(BaseModel):
    synthetic_crop_data: str = Field(
        description="Generated synthetic crop yield data in CSV format, including headers."
    )


class SyntheticCropDataResponse(SyntheticCropDataOutput):
    record_count: int
    header_valid: bool


class TrainingInput(BaseModel):
    dataset: str = Field(
        description="CSV dataset including soil_ph, rainfall, temp, fertilizer, crop, yield."
    )


class TrainedFeatureImportance(BaseModel):
    feature: str
    importance: float


class TrainingOutput(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_insights: str = Field(
        description="A summarized text of the decision patterns found in the data."
    )
    accuracy: float = Field(ge=0, le=1, description="Model accuracy (0-1).")
    feature_importance: List[TrainedFeatureImportance]
    version: str


class PredictYieldAIInput(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    crop: str
    soil_ph: float = Field(validation_alias=AliasChoices("soil_ph", "soilPH"))
    rainfall: float
    temp: float
    fertilizer: float
    model_context: Optional[str] = Field(
        default=None, description="Context from a previously trained model run."
    )


class PredictYieldAIOutput(BaseModel):
    predicted_yield: float = Field(
        description="Predicted yield in kg/ha.",
        validation_alias=AliasChoices("predicted_yield", "yield"),
    )
    confidence: float = Field(ge=0, le=1, description="Confidence score between 0 and 1.")
    reasoning: str = Field(
        description="Brief explanation of why this yield was predicted based on the forest logic."
    )
