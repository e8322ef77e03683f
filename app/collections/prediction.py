from typing import Iterable, Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from app.collections.bulk import insert_in_batches
from app.core.mongodb import get_prediction_collection
from app.models.prediction import PredictionRecord


async def get_prediction_from_id(prediction_id: str) -> Optional[PredictionRecord]:
    prediction_collection: AsyncIOMotorCollection = get_prediction_collection()
    response = await prediction_collection.find_one({"_id": prediction_id})
    return PredictionRecord.model_validate(response) if response else None


async def get_predictions_from_user_id(
    user_id: str, limit: Optional[int] = None
) -> list[PredictionRecord]:
    prediction_collection: AsyncIOMotorCollection = get_prediction_collection()
    cursor = prediction_collection.find({"user_id": user_id}).sort("created_at", -1)
    if limit:
        cursor = cursor.limit(limit)
    return [PredictionRecord.model_validate(item) async for item in cursor]


async def count_predictions_from_user_id(user_id: str) -> int:
    prediction_collection: AsyncIOMotorCollection = get_prediction_collection()
    return await prediction_collection.count_documents({"user_id": user_id})


async def get_average_predicted_yield(user_id: str) -> Optional[float]:
    prediction_collection: AsyncIOMotorCollection = get_prediction_collection()
    pipeline = [
        {"$match": {"user_id": user_id}},
        {"$group": {"_id": None, "average": {"$avg": "$predicted_yield"}}},
    ]
    async for item in prediction_collection.aggregate(pipeline):
        return item.get("average")
    return None


async def save_prediction(prediction: PredictionRecord) -> PredictionRecord:
    prediction_collection: AsyncIOMotorCollection = get_prediction_collection()
    payload = prediction.model_dump(mode="json", exclude_none=True, by_alias=True)
    await prediction_collection.replace_one(
        {"_id": prediction.id}, payload, upsert=True
    )
    response = await prediction_collection.find_one({"_id": prediction.id})
    return PredictionRecord.model_validate(response)


async def insert_predictions(predictions: Iterable[PredictionRecord]) -> int:
    return await insert_in_batches(get_prediction_collection(), predictions)


async def delete_prediction(prediction_id: str) -> bool:
    prediction_collection: AsyncIOMotorCollection = get_prediction_collection()
    result = await prediction_collection.delete_one({"_id": prediction_id})
    return result.deleted_count > 0


async def delete_predictions_from_user_id(user_id: str) -> int:
    prediction_collection: AsyncIOMotorCollection = get_prediction_collection()
    result = await prediction_collection.delete_many({"user_id": user_id})
    return result.deleted_count
