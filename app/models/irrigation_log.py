from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field

from .field import MoistureStatus


class IrrigationType(str, Enum):
    DRIP = "Drip"
    SPRINKLER = "Sprinkler"
    PIVOT = "Pivot"
    SURFACE = "Surface"


class IrrigationStatus(str, Enum):
    COMPLETED = "Completed"
    IN_PROGRESS = "In Progress"


class IrrigationLog(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    owner_id: Optional[str] = Field(default=None)
    field_name: str = Field(validation_alias=AliasChoices("field_name", "fieldName"))
    type: IrrigationType
    duration_minutes: int = Field(ge=0)
    volume_liters: float = Field(ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: IrrigationStatus = Field(default=IrrigationStatus.COMPLETED)


class FieldMoisture(BaseModel):
    field: str
    level: float
    status: MoistureStatus


class WaterSummary(BaseModel):
    average_moisture: int
    average_status: MoistureStatus
    fields: List[FieldMoisture]
    recent_logs: List[IrrigationLog]
