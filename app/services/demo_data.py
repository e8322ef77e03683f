import asyncio
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.collections.field import insert_fields
from app.collections.irrigation_log import insert_irrigation_logs
from app.collections.prediction import insert_predictions
from app.models.field import DEFAULT_MAP_CENTER, FarmField
from app.models.irrigation_log import IrrigationLog, IrrigationStatus, IrrigationType
from app.models.prediction import PredictionRecord
from app.services.yield_estimator import BASE_YIELDS

logger = logging.getLogger(__name__)

DEMO_CROPS = list(BASE_YIELDS)
DEMO_FIELD_PREFIXES = [
    "North",
    "East",
    "South",
    "West",
    "Central",
    "Valley",
    "Ridge",
    "Brook",
    "Delta",
    "Plateau",
]
DEMO_FIELD_COUNT = 250
DEMO_PREDICTION_COUNT = 500
DEMO_IRRIGATION_LOG_COUNT = 100


def _uniform(rng: random.Random, low: float, high: float) -> float:
    return low + rng.random() * (high - low)


def generate_demo_fields(
    owner_id: str,
    count: int = DEMO_FIELD_COUNT,
    rng: Optional[random.Random] = None,
) -> list[FarmField]:
    rng = rng or random.Random()
    base_lat, base_lng = DEFAULT_MAP_CENTER
    now = datetime.now(timezone.utc)
    return [
        FarmField(
            owner_id=owner_id,
            name=f"{rng.choice(DEMO_FIELD_PREFIXES)} Sector {i + 1}",
            crop=rng.choice(DEMO_CROPS),
            lat=base_lat + (rng.random() - 0.5) * 0.12,
            lng=base_lng + (rng.random() - 0.5) * 0.12,
            moisture=rng.randrange(40, 80),
            soil_ph=round(_uniform(rng, 5.8, 7.2), 1),
            temp=rng.randrange(20, 30),
            health=rng.randrange(75, 95),
            last_updated=now,
        )
        for i in range(count)
    ]


def generate_demo_predictions(
    user_id: str,
    count: int = DEMO_PREDICTION_COUNT,
    rng: Optional[random.Random] = None,
) -> list[PredictionRecord]:
    rng = rng or random.Random()
    now = datetime.now(timezone.utc)
    return [
        PredictionRecord(
            user_id=user_id,
            crop=rng.choice(DEMO_CROPS),
            soil_ph=round(_uniform(rng, 5.5, 7.5), 1),
            rainfall_mm=rng.randrange(600, 1400),
            temperature_c=rng.randrange(15, 30),
            fertilizer_kg_per_ha=rng.randrange(100, 200),
            predicted_yield=rng.randrange(3000, 8000),
            confidence_score=0.85 + rng.random() * 0.1,
            created_at=now - timedelta(days=rng.random() * 365),
        )
        for _ in range(count)
    ]


def generate_demo_irrigation_logs(
    owner_id: str,
    fields: list[FarmField],
    count: int = DEMO_IRRIGATION_LOG_COUNT,
    rng: Optional[random.Random] = None,
) -> list[IrrigationLog]:
    if not fields:
        return []
    rng = rng or random.Random()
    now = datetime.now(timezone.utc)
    irrigation_types = list(IrrigationType)
    return [
        IrrigationLog(
            owner_id=owner_id,
            field_name=rng.choice(fields).name,
            type=rng.choice(irrigation_types),
            duration_minutes=rng.randrange(15, 60),
            volume_liters=rng.randrange(500, 2500),
            timestamp=now - timedelta(days=rng.random() * 7),
            status=(
                IrrigationStatus.COMPLETED
                if rng.random() > 0.1
                else IrrigationStatus.IN_PROGRESS
            ),
        )
        for _ in range(count)
    ]


async def seed_demo_data(
    owner_id: str, rng: Optional[random.Random] = None
) -> dict[str, int]:
    """Generate and bulk insert demo fields, predictions and irrigation logs."""
    rng = rng or random.Random()
    fields = generate_demo_fields(owner_id, rng=rng)
    predictions = generate_demo_predictions(owner_id, rng=rng)
    logs = generate_demo_irrigation_logs(owner_id, fields, rng=rng)

    logger.info("Seeding demo data for user %s", owner_id)
    field_count, prediction_count, log_count = await asyncio.gather(
        insert_fields(fields),
        insert_predictions(predictions),
        insert_irrigation_logs(logs),
    )
    logger.info(
        "Seeded %d fields, %d predictions, %d irrigation logs for user %s",
        field_count,
        prediction_count,
        log_count,
        owner_id,
    )
    return {
        "fields": field_count,
        "predictions": prediction_count,
        "irrigation_logs": log_count,
    }
