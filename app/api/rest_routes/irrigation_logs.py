from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.collections.irrigation_log import (
    delete_irrigation_log,
    get_irrigation_log_from_id,
    get_recent_irrigation_logs,
    save_irrigation_log,
)
from app.core.security import verify_jwt
from app.models.irrigation_log import IrrigationLog, WaterSummary
from app.services.farm_overview import get_water_summary

router = APIRouter(prefix="/irrigation-logs", tags=["Water Intelligence"])


@router.post(
    "/",
    response_model=IrrigationLog,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
async def create_irrigation_log(log: IrrigationLog, user_payload=Depends(verify_jwt)):
    owner_id = user_payload["sub"]
    existing = await get_irrigation_log_from_id(log.id)
    if existing and existing.owner_id != owner_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Irrigation log with ID '{log.id}' not found.",
        )
    log.owner_id = owner_id
    return await save_irrigation_log(log)


@router.get(
    "/",
    response_model=List[IrrigationLog],
    response_model_exclude_none=True,
)
async def get_irrigation_logs(
    limit: int = Query(default=10, ge=1, le=200),
    user_payload=Depends(verify_jwt),
):
    """Most recent irrigation events first."""
    return await get_recent_irrigation_logs(user_payload["sub"], limit=limit)


@router.get(
    "/water-summary",
    response_model=WaterSummary,
    response_model_exclude_none=True,
)
async def get_water_intelligence_summary(user_payload=Depends(verify_jwt)):
    """Per-field moisture status, average moisture and the latest irrigation logs."""
    return await get_water_summary(user_payload["sub"])


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_irrigation_log_by_id(log_id: str, user_payload=Depends(verify_jwt)):
    log = await get_irrigation_log_from_id(log_id)
    if not log or log.owner_id != user_payload["sub"]:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Irrigation log with ID '{log_id}' not found.",
        )
    await delete_irrigation_log(log_id)
    return
