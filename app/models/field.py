from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field

DEFAULT_MAP_CENTER = (34.0522, -118.2437)
DEFAULT_MAP_ZOOM = 14


class MoistureStatus(str, Enum):
    OPTIMAL = "Optimal"
    MODERATE = "Moderate"
    LOW = "Low"


def moisture_status(level: float) -> MoistureStatus:
    if level > 60:
        return MoistureStatus.OPTIMAL
    if level > 40:
        return MoistureStatus.MODERATE
    return MoistureStatus.LOW


class FarmField(BaseModel):
    """A farm field shown on the map and in water intelligence."""

    id: str = Field(
        default_factory=lambda: uuid4().hex,
        description="UUID of the field",
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    owner_id: Optional[str] = Field(
        default=None, description="User id of the owner, set by the backend."
    )
    name: str = Field(description="Display name of the field.")
    crop: str = Field(description="Crop currently grown on the field.")
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    moisture: float = Field(ge=0, le=100, description="Soil moisture in percent.")
    soil_ph: Optional[float] = Field(
        default=None,
        ge=0,
        le=14,
        validation_alias=AliasChoices("soil_ph", "soilPH"),
    )
    temp: Optional[float] = Field(default=None, description="Temperature in Celsius.")
    health: Optional[float] = Field(
        default=None, ge=0, le=100, description="Crop health index in percent."
    )
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        validation_alias=AliasChoices("last_updated", "lastUpdated"),
    )


class FieldMarker(BaseModel):
    id: str
    name: str
    crop: str
    lat: float
    lng: float
    moisture: float
    moisture_status: MoistureStatus
    health: Optional[float] = None


class FieldMapResponse(BaseModel):
    center_lat: float
    center_lng: float
    zoom: int = DEFAULT_MAP_ZOOM
    selected_field_id: Optional[str] = None
    markers: List[FieldMarker]
