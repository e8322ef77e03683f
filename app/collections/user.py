from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.mongodb import get_user_collection
from app.models.user import User, normalize_email


async def get_user_from_id(user_id: str) -> Optional[User]:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    item = await user_collection.find_one({"_id": user_id})
    return User.model_validate(item) if item else None


async def get_user_from_email(email: str) -> Optional[User]:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    item = await user_collection.find_one({"email": normalize_email(email)})
    return User.model_validate(item) if item else None


async def save_user(user: User) -> User:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    payload = user.model_dump(mode="json", exclude_none=True, by_alias=True)
    await user_collection.replace_one({"_id": user.id}, payload, upsert=True)
    return User.model_validate(await user_collection.find_one({"_id": user.id}))


async def delete_user(user_id: str) -> bool:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    result = await user_collection.delete_one({"_id": user_id})
    return result.deleted_count > 0
