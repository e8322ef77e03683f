import logging
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.models.user import UserRole

from .config import settings

ALGORITHM = "HS256"
# Codes are not delivered anywhere yet; every account accepts this one.
MOCK_OTP = "123456"

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/verify-otp")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Sign ``data`` (``sub``, ``role``, ``email``) with an expiry claim."""
    lifetime = expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    claims = {**data, "exp": datetime.now(timezone.utc) + lifetime}
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=ALGORITHM)


async def verify_jwt(token: str = Depends(oauth2_scheme)) -> dict:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.PyJWTError as e:
        logger.debug("Rejected bearer token: %s", e)
        raise _unauthorized("Could not validate credentials")
    if not payload.get("sub"):
        raise _unauthorized("Could not validate credentials")
    return payload


async def verify_admin(user_payload: dict = Depends(verify_jwt)) -> dict:
    if user_payload.get("role") != UserRole.ADMIN.value:
        logger.warning("Non-admin %s tried an admin route", user_payload.get("sub"))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user_payload


async def get_otp(email: str) -> str:
    logger.info("Sending one-time code to %s", email)
    return MOCK_OTP


async def validate_otp(email: str, otp: str) -> bool:
    logger.info("Validating one-time code for %s", email)
    return otp == MOCK_OTP
