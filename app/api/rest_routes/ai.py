from fastapi import APIRouter, Depends

from app.core.security import verify_jwt
from app.models.yield_ai import (
    AnalyzeYieldInput,
    AnalyzeYieldOutput,
    ExplainRecommendationInput,
    ExplainRecommendationOutput,
    PredictYieldAIInput,
    PredictYieldAIOutput,
    SyntheticCropDataInput,
    SyntheticCropDataResponse,
    TrainingInput,
    TrainingOutput,
)
from app.services import yield_ai_service

router = APIRouter(
    prefix="/ai",
    tags=["AI Insights"],
    dependencies=[Depends(verify_jwt)],
)


@router.post("/analyze-yield", response_model=AnalyzeYieldOutput)
async def analyze_yield(data: AnalyzeYieldInput):
    """Insight and recommendation for a calculated yield."""
    return await yield_ai_service.analyze_yield(data)


@router.post("/explain-recommendation", response_model=ExplainRecommendationOutput)
async def explain_recommendation(data: ExplainRecommendationInput):
    return await yield_ai_service.explain_recommendation(data)


@router.post("/synthetic-data", response_model=SyntheticCropDataResponse)
async def generate_synthetic_data(data: SyntheticCropDataInput):
    return await yield_ai_service.generate_synthetic_crop_data(data)


@router.post("/train", response_model=TrainingOutput)
async def train_model(data: TrainingInput):
    return await yield_ai_service.train_random_forest(data)


@router.post("/predict-yield", response_model=PredictYieldAIOutput)
async def predict_yield(data: PredictYieldAIInput):
    return await yield_ai_service.predict_yield_ai(data)
