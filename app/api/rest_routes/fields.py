from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.collections.field import (
    delete_field,
    get_field_from_id,
    get_fields_from_owner_id,
    save_field,
)
from app.core.security import verify_jwt
from app.models.field import FarmField, FieldMapResponse
from app.services.farm_overview import get_field_map

router = APIRouter(prefix="/fields", tags=["Fields"])


async def _get_owned_field(field_id: str, owner_id: str) -> FarmField:
    field = await get_field_from_id(field_id)
    if not field or field.owner_id != owner_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Field with ID '{field_id}' not found.",
        )
    return field


@router.post(
    "/",
    response_model=FarmField,
    status_code=status.HTTP_201_CREATED,
    summary="Create or Update a Field",
    response_model_exclude_none=True,
)
async def create_or_update_field(field: FarmField, user_payload=Depends(verify_jwt)):
    """
    Create a new field or update an existing one (upsert) for the current user.
    Updating a field that belongs to another user is reported as not found.
    """
    owner_id = user_payload["sub"]
    existing = await get_field_from_id(field.id)
    if existing and existing.owner_id != owner_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Field with ID '{field.id}' not found.",
        )
    field.owner_id = owner_id
    return await save_field(field)


@router.get(
    "/",
    response_model=List[FarmField],
    summary="Get all fields for the current user",
    response_model_exclude_none=True,
)
async def get_fields(user_payload=Depends(verify_jwt)):
    return await get_fields_from_owner_id(user_payload["sub"])


@router.get(
    "/map",
    response_model=FieldMapResponse,
    summary="Map markers for the current user's fields",
    response_model_exclude_none=True,
)
async def get_fields_map(
    selected_field_id: Optional[str] = Query(
        default=None, description="Field to center the map on."
    ),
    user_payload=Depends(verify_jwt),
):
    """
    Returns a marker per field with its moisture status, and the map center:
    the selected field, else the first field, else the default location.
    """
    return await get_field_map(user_payload["sub"], selected_field_id)


@router.get(
    "/{field_id}",
    response_model=FarmField,
    summary="Get a field by its ID",
    response_model_exclude_none=True,
)
async def get_field_by_id(field_id: str, user_payload=Depends(verify_jwt)):
    return await _get_owned_field(field_id, user_payload["sub"])


@router.delete("/{field_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_field_by_id(field_id: str, user_payload=Depends(verify_jwt)):
    await _get_owned_field(field_id, user_payload["sub"])
    await delete_field(field_id)
    return
