from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.collections.prediction import (
    delete_prediction,
    get_prediction_from_id,
    get_predictions_from_user_id,
    save_prediction,
)
from app.core.security import verify_jwt
from app.models.prediction import PredictionRecord, PredictionResponse
from app.models.yield_estimation import EstimationRequest, EstimationResult
from app.services.yield_estimator import estimate

router = APIRouter(prefix="/predictions", tags=["Predictions"])


async def _get_owned_prediction(prediction_id: str, user_id: str) -> PredictionRecord:
    prediction = await get_prediction_from_id(prediction_id)
    if not prediction or prediction.user_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Prediction with ID '{prediction_id}' not found.",
        )
    return prediction


@router.post(
    "/estimate",
    response_model=EstimationResult,
    summary="Estimate yield without saving",
)
async def estimate_yield(
    request: EstimationRequest, user_payload=Depends(verify_jwt)
) -> EstimationResult:
    return estimate(request)


@router.post(
    "/",
    response_model=PredictionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Estimate yield and save it to the farm records",
)
async def create_prediction(
    request: EstimationRequest, user_payload=Depends(verify_jwt)
) -> PredictionResponse:
    """
    Runs the yield estimator and stores the inputs and outputs, keyed by the
    current user with a server-assigned creation time.
    """
    result = estimate(request)
    saved = await save_prediction(
        PredictionRecord.from_estimate(user_payload["sub"], request, result)
    )
    return PredictionResponse(
        **saved.model_dump(),
        feature_importances=result.feature_importances,
    )


@router.get(
    "/",
    response_model=List[PredictionRecord],
    summary="Saved predictions, newest first",
)
async def get_predictions(
    limit: int = Query(default=50, ge=1, le=500),
    user_payload=Depends(verify_jwt),
):
    return await get_predictions_from_user_id(user_payload["sub"], limit=limit)


@router.get("/{prediction_id}", response_model=PredictionRecord)
async def get_prediction_by_id(prediction_id: str, user_payload=Depends(verify_jwt)):
    return await _get_owned_prediction(prediction_id, user_payload["sub"])


@router.delete("/{prediction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_prediction_by_id(prediction_id: str, user_payload=Depends(verify_jwt)):
    await _get_owned_prediction(prediction_id, user_payload["sub"])
    await delete_prediction(prediction_id)
    return
