from fastapi import APIRouter, Depends

from app.core.security import verify_jwt
from app.models.dashboard import DashboardSummary
from app.services.farm_overview import get_dashboard_summary

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/summary", response_model=DashboardSummary)
async def get_summary(user_payload=Depends(verify_jwt)):
    return await get_dashboard_summary(user_payload["sub"])
