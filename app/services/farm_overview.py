import asyncio
import math
from typing import Optional

from app.collections.field import get_fields_from_owner_id
from app.collections.irrigation_log import (
    count_irrigation_logs,
    get_recent_irrigation_logs,
)
from app.collections.prediction import (
    count_predictions_from_user_id,
    get_average_predicted_yield,
    get_predictions_from_user_id,
)
from app.models.dashboard import DashboardSummary
from app.models.field import (
    DEFAULT_MAP_CENTER,
    FarmField,
    FieldMapResponse,
    FieldMarker,
    moisture_status,
)
from app.models.irrigation_log import FieldMoisture, IrrigationLog, WaterSummary

RECENT_LOG_LIMIT = 10
RECENT_PREDICTION_LIMIT = 5


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def average_moisture(fields: list[FarmField]) -> int:
    if not fields:
        return 0
    return _round_half_up(sum(field.moisture for field in fields) / len(fields))


def build_field_map(
    fields: list[FarmField], selected_field_id: Optional[str] = None
) -> FieldMapResponse:
    """Center on the selected field, else the first field, else the default."""
    selected = next((f for f in fields if f.id == selected_field_id), None)
    anchor = selected or (fields[0] if fields else None)
    center_lat, center_lng = (anchor.lat, anchor.lng) if anchor else DEFAULT_MAP_CENTER
    return FieldMapResponse(
        center_lat=center_lat,
        center_lng=center_lng,
        selected_field_id=selected.id if selected else None,
        markers=[
            FieldMarker(
                id=field.id,
                name=field.name,
                crop=field.crop,
                lat=field.lat,
                lng=field.lng,
                moisture=field.moisture,
                moisture_status=moisture_status(field.moisture),
                health=field.health,
            )
            for field in fields
        ],
    )


def build_water_summary(
    fields: list[FarmField], recent_logs: list[IrrigationLog]
) -> WaterSummary:
    average = average_moisture(fields)
    return WaterSummary(
        average_moisture=average,
        average_status=moisture_status(average),
        fields=[
            FieldMoisture(
                field=field.name,
                level=field.moisture,
                status=moisture_status(field.moisture),
            )
            for field in fields
        ],
        recent_logs=recent_logs,
    )


async def get_field_map(
    owner_id: str, selected_field_id: Optional[str] = None
) -> FieldMapResponse:
    fields = await get_fields_from_owner_id(owner_id)
    return build_field_map(fields, selected_field_id)


async def get_water_summary(owner_id: str) -> WaterSummary:
    fields, logs = await asyncio.gather(
        get_fields_from_owner_id(owner_id),
        get_recent_irrigation_logs(owner_id, limit=RECENT_LOG_LIMIT),
    )
    return build_water_summary(fields, logs)


async def get_dashboard_summary(user_id: str) -> DashboardSummary:
    (
        fields,
        prediction_count,
        log_count,
        average_yield,
        recent_predictions,
    ) = await asyncio.gather(
        get_fields_from_owner_id(user_id),
        count_predictions_from_user_id(user_id),
        count_irrigation_logs(user_id),
        get_average_predicted_yield(user_id),
        get_predictions_from_user_id(user_id, limit=RECENT_PREDICTION_LIMIT),
    )
    moisture = average_moisture(fields)
    return DashboardSummary(
        field_count=len(fields),
        prediction_count=prediction_count,
        irrigation_log_count=log_count,
        average_predicted_yield=_round_half_up(average_yield or 0),
        average_moisture=moisture,
        moisture_status=moisture_status(moisture),
        recent_predictions=recent_predictions,
    )
