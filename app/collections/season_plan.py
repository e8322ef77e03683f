from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.mongodb import get_plan_collection
from app.models.season_plan import SeasonPlan


async def get_plan_from_id(plan_id: str) -> Optional[SeasonPlan]:
    plan_collection: AsyncIOMotorCollection = get_plan_collection()
    response = await plan_collection.find_one({"_id": plan_id})
    return SeasonPlan.model_validate(response) if response else None


async def get_plans_from_owner_id(owner_id: str) -> list[SeasonPlan]:
    plan_collection: AsyncIOMotorCollection = get_plan_collection()
    items = plan_collection.find({"owner_id": owner_id}).sort("start_date", -1)
    return [SeasonPlan.model_validate(item) async for item in items]


async def save_plan(plan: SeasonPlan) -> SeasonPlan:
    plan_collection: AsyncIOMotorCollection = get_plan_collection()
    payload = plan.model_dump(mode="json", exclude_none=True, by_alias=True)
    await plan_collection.replace_one({"_id": plan.id}, payload, upsert=True)
    response = await plan_collection.find_one({"_id": plan.id})
    return SeasonPlan.model_validate(response)


async def delete_plan(plan_id: str) -> bool:
    plan_collection: AsyncIOMotorCollection = get_plan_collection()
    result = await plan_collection.delete_one({"_id": plan_id})
    return result.deleted_count > 0


async def delete_plans_from_owner_id(owner_id: str) -> int:
    plan_collection: AsyncIOMotorCollection = get_plan_collection()
    result = await plan_collection.delete_many({"owner_id": owner_id})
    return result.deleted_count
