"""User data models"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..utils.timeutils import as_local, local_now


_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def _fold(email: str) -> str:
    return (email or "").strip().casefold()


def canonical_email(email: str) -> str:
    """
    Identity key exactly as EmailStr renders it, so "<ana@x.com>" and
    "ANA@x.com" both become "ana@x.com". Raises pydantic's ValidationError
    for malformed addresses.
    """
    return _EMAIL_ADAPTER.validate_python(_fold(email))


def normalize_email(email: str) -> str:
    """Canonical key for lookups; malformed input is only folded and will never match"""
    try:
        return canonical_email(email)
    except PydanticValidationError:
        return _fold(email)


class User(BaseModel):
    """User record keyed by normalized email. Only the bcrypt hash is kept."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    email: EmailStr
    password_hash: str = Field(alias="passwordHash", repr=False)
    eco_points: int = Field(default=0, ge=0, alias="ecoPoints")
    created_at: datetime = Field(default_factory=local_now, alias="createdAt")

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, value):
        if isinstance(value, str):
            return normalize_email(value)
        return value

    @field_validator("created_at")
    @classmethod
    def _localize_created_at(cls, value: datetime) -> datetime:
        return as_local(value)

    def to_record(self) -> dict:
        """JSON-compatible record in the persisted (camelCase) layout"""
        return self.model_dump(mode="json", by_alias=True)
