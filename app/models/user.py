from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRole(str, Enum):
    FARMER = "farmer"
    ADMIN = "admin"


class User(BaseModel):
    """Account holder. Fields, predictions, logs and plans hang off its id."""

    model_config = ConfigDict(use_enum_values=True)

    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    email: str = Field(..., min_length=3)
    name: str = Field(..., min_length=1)
    role: UserRole = Field(default=UserRole.FARMER)
    is_verified: bool = Field(default=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_login_at: Optional[datetime] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return normalize_email(value)

    def token_claims(self) -> dict:
        return {"sub": self.id, "role": self.role, "email": self.email}
