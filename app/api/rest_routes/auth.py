import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from app.collections.field import delete_fields_from_owner_id
from app.collections.irrigation_log import delete_irrigation_logs_from_owner_id
from app.collections.prediction import delete_predictions_from_user_id
from app.collections.season_plan import delete_plans_from_owner_id
from app.collections.user import delete_user, get_user_from_email, get_user_from_id, save_user
from app.core.security import create_access_token, get_otp, validate_otp, verify_jwt
from app.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class OTPSendRequest(BaseModel):
    email: str
    name: str | None = None


class OTPSendResponse(BaseModel):
    message: str
    email: str
    is_new_user: bool


class OTPVerifyRequest(BaseModel):
    email: str
    otp: str


class Session(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User


@router.post("/send-otp", response_model=OTPSendResponse)
async def send_otp(request_data: OTPSendRequest):
    """
    Signup and login share this endpoint. A name marks the request as a
    signup, so it is required for unknown emails and rejected for known ones.
    """
    user = await get_user_from_email(request_data.email)

    if user is not None and request_data.name:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account with this email already exists.",
        )
    if user is None and not request_data.name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name is required to create an account.",
        )

    is_new_user = user is None
    if is_new_user:
        user = await save_user(User(email=request_data.email, name=request_data.name))
        logger.info("Created account %s", user.id)

    await get_otp(user.email)
    return OTPSendResponse(
        message="OTP sent successfully.", email=user.email, is_new_user=is_new_user
    )


@router.post("/verify-otp", response_model=Session)
async def verify_otp(verify_data: OTPVerifyRequest):
    user = await get_user_from_email(verify_data.email)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found."
        )
    if not await validate_otp(user.email, verify_data.otp):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid OTP"
        )

    user.is_verified = True
    user.last_login_at = datetime.now(timezone.utc)
    user = await save_user(user)
    return Session(access_token=create_access_token(data=user.token_claims()), user=user)


@router.get("/user", response_model=User)
async def get_current_user(user_payload: dict = Depends(verify_jwt)):
    user = await get_user_from_id(user_payload["sub"])
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found."
        )
    return user


@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_current_user(user_payload: dict = Depends(verify_jwt)):
    """Remove the account and everything recorded under it."""
    user_id = user_payload["sub"]
    await asyncio.gather(
        delete_fields_from_owner_id(user_id),
        delete_predictions_from_user_id(user_id),
        delete_irrigation_logs_from_owner_id(user_id),
        delete_plans_from_owner_id(user_id),
    )
    await delete_user(user_id)
    logger.info("Deleted account %s and its records", user_id)
