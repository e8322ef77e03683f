from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.core.security import verify_admin
from app.models.yield_ai import SyntheticCropDataInput, SyntheticCropDataResponse
from app.services import yield_ai_service
from app.services.demo_data import seed_demo_data

SEED_CROP_DATA_CSV = "soil_ph,rainfall,temp,fertilizer,crop,yield\n6.5,1000,24,150,Corn,8500"

router = APIRouter(prefix="/admin", tags=["Administration"])


class SeedDemoDataResponse(BaseModel):
    message: str
    inserted: dict[str, int]


class AdminSyntheticDataRequest(BaseModel):
    existing_crop_data: Optional[str] = None
    num_records: int = Field(default=400, gt=0)


@router.post("/seed-demo-data", response_model=SeedDemoDataResponse)
async def seed_demo(user_payload: dict = Depends(verify_admin)):
    """Bulk insert demo fields, predictions and irrigation logs for the caller."""
    inserted = await seed_demo_data(user_payload["sub"])
    return SeedDemoDataResponse(message="Demo data seeded successfully", inserted=inserted)


@router.post("/synthetic-data", response_model=SyntheticCropDataResponse)
async def generate_synthetic_dataset(
    request: AdminSyntheticDataRequest,
    _user_payload: dict = Depends(verify_admin),
):
    return await yield_ai_service.generate_synthetic_crop_data(
        SyntheticCropDataInput(
            existing_crop_data=request.existing_crop_data or SEED_CROP_DATA_CSV,
            num_records=request.num_records,
        )
    )
