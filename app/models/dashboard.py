from typing import List

from pydantic import BaseModel

from .field import MoistureStatus
from .prediction import PredictionRecord


class DashboardSummary(BaseModel):
    field_count: int
    prediction_count: int
    irrigation_log_count: int
    average_predicted_yield: int
    average_moisture: int
    moisture_status: MoistureStatus
    recent_predictions: List[PredictionRecord]
