from typing import Iterable, Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from app.collections.bulk import insert_in_batches
from app.core.mongodb import get_field_collection
from app.models.field import FarmField


async def get_field_from_id(field_id: str) -> Optional[FarmField]:
    field_collection: AsyncIOMotorCollection = get_field_collection()
    response = await field_collection.find_one({"_id": field_id})
    return FarmField.model_validate(response) if response else None


async def get_fields_from_owner_id(owner_id: str) -> list[FarmField]:
    field_collection: AsyncIOMotorCollection = get_field_collection()
    items = field_collection.find({"owner_id": owner_id}).sort("name", 1)
    return [FarmField.model_validate(item) async for item in items]


async def save_field(field: FarmField) -> FarmField:
    field_collection: AsyncIOMotorCollection = get_field_collection()
    payload = field.model_dump(mode="json", exclude_none=True, by_alias=True)
    await field_collection.replace_one({"_id": field.id}, payload, upsert=True)
    response = await field_collection.find_one({"_id": field.id})
    return FarmField.model_validate(response)


async def insert_fields(fields: Iterable[FarmField]) -> int:
    return await insert_in_batches(get_field_collection(), fields)


async def delete_field(field_id: str) -> bool:
    field_collection: AsyncIOMotorCollection = get_field_collection()
    result = await field_collection.delete_one({"_id": field_id})
    return result.deleted_count > 0


async def delete_fields_from_owner_id(owner_id: str) -> int:
    field_collection: AsyncIOMotorCollection = get_field_collection()
    result = await field_collection.delete_many({"owner_id": owner_id})
    return result.deleted_count
