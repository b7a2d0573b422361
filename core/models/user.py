# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# Registration, login and profile shapes. The stored password hash never
# appears in a response model.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class UserRole(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


class UserRegister(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=128)
    phone: str | None = Field(default=None, max_length=40)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.strip().lower()


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.strip().lower()


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    role: UserRole = UserRole.CUSTOMER
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    """Returned by register and login."""
    user: UserResponse
    token: str


class RoleUpdate(BaseModel):
    role: UserRole
