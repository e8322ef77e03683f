from typing import Iterable, Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from app.collections.bulk import insert_in_batches
from app.core.mongodb import get_irrigation_log_collection
from app.models.irrigation_log import IrrigationLog


async def get_irrigation_log_from_id(log_id: str) -> Optional[IrrigationLog]:
    collection: AsyncIOMotorCollection = get_irrigation_log_collection()
    response = await collection.find_one({"_id": log_id})
    return IrrigationLog.model_validate(response) if response else None


async def get_recent_irrigation_logs(owner_id: str, limit: int = 10) -> list[IrrigationLog]:
    collection: AsyncIOMotorCollection = get_irrigation_log_collection()
    cursor = collection.find({"owner_id": owner_id}).sort("timestamp", -1).limit(limit)
    return [IrrigationLog.model_validate(item) async for item in cursor]


async def count_irrigation_logs(owner_id: str) -> int:
    collection: AsyncIOMotorCollection = get_irrigation_log_collection()
    return await collection.count_documents({"owner_id": owner_id})


async def save_irrigation_log(log: IrrigationLog) -> IrrigationLog:
    collection: AsyncIOMotorCollection = get_irrigation_log_collection()
    payload = log.model_dump(mode="json", exclude_none=True, by_alias=True)
    await collection.replace_one({"_id": log.id}, payload, upsert=True)
    response = await collection.find_one({"_id": log.id})
    return IrrigationLog.model_validate(response)


async def insert_irrigation_logs(logs: Iterable[IrrigationLog]) -> int:
    return await insert_in_batches(get_irrigation_log_collection(), logs)


async def delete_irrigation_log(log_id: str) -> bool:
    collection: AsyncIOMotorCollection = get_irrigation_log_collection()
    result = await collection.delete_one({"_id": log_id})
    return result.deleted_count > 0


async def delete_irrigation_logs_from_owner_id(owner_id: str) -> int:
    collection: AsyncIOMotorCollection = get_irrigation_log_collection()
    result = await collection.delete_many({"owner_id": owner_id})
    return result.deleted_count
