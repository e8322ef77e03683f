from datetime import date
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field, model_validator


class PlanStatus(str, Enum):
    DRAFT = "Draft"
    ACTIVE = "Active"
    COMPLETED = "Completed"


class SeasonPlan(BaseModel):
    """A planting cycle on the season planner timeline."""

    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    owner_id: Optional[str] = Field(default=None)
    crop: str
    field_name: str = Field(validation_alias=AliasChoices("field_name", "fieldName"))
    start_date: date = Field(validation_alias=AliasChoices("start_date", "startDate"))
    end_date: date = Field(validation_alias=AliasChoices("end_date", "endDate"))
    status: PlanStatus = Field(default=PlanStatus.DRAFT)
    expected_yield: Optional[int] = Field(
        default=None, ge=0, description="Expected yield in kg/ha."
    )

    @model_validator(mode="after")
    def _check_dates(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must be on or before end_date")
        return self
