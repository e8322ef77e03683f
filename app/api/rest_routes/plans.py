from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.collections.season_plan import (
    delete_plan,
    get_plan_from_id,
    get_plans_from_owner_id,
    save_plan,
)
from app.core.security import verify_jwt
from app.models.season_plan import SeasonPlan
from app.models.yield_estimation import EstimationRequest
from app.services.yield_estimator import (
    OPTIMAL_RAINFALL_MM,
    OPTIMAL_SOIL_PH,
    OPTIMAL_TEMPERATURE_C,
    estimate,
)

DEFAULT_PLAN_FERTILIZER_KG_PER_HA = 150

router = APIRouter(prefix="/plans", tags=["Season Planner"])


def expected_yield_for(crop: str) -> int:
    """Yield for the crop at optimum conditions with the default fertilizer rate."""
    request = EstimationRequest(
        crop=crop,
        soil_ph=OPTIMAL_SOIL_PH,
        rainfall_mm=OPTIMAL_RAINFALL_MM,
        temperature_c=OPTIMAL_TEMPERATURE_C,
        fertilizer_kg_per_ha=DEFAULT_PLAN_FERTILIZER_KG_PER_HA,
    )
    return estimate(request).predicted_yield


@router.post(
    "/",
    response_model=SeasonPlan,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
async def create_plan(plan: SeasonPlan, user_payload=Depends(verify_jwt)):
    """Create a plan, or replace one of the caller's own plans by id."""
    owner_id = user_payload["sub"]
    existing = await get_plan_from_id(plan.id)
    if existing and existing.owner_id != owner_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Plan with ID '{plan.id}' not found.",
        )
    plan.owner_id = owner_id
    if plan.expected_yield is None:
        plan.expected_yield = expected_yield_for(plan.crop)
    return await save_plan(plan)


@router.get(
    "/",
    response_model=List[SeasonPlan],
    response_model_exclude_none=True,
)
async def get_plans(user_payload=Depends(verify_jwt)):
    """Season plans ordered by start date, latest first."""
    return await get_plans_from_owner_id(user_payload["sub"])


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan_by_id(plan_id: str, user_payload=Depends(verify_jwt)):
    plan = await get_plan_from_id(plan_id)
    if not plan or plan.owner_id != user_payload["sub"]:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Plan with ID '{plan_id}' not found.",
        )
    await delete_plan(plan_id)
    return
