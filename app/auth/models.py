# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict

from core.models.user import UserRole


class AuthUser(BaseModel):
    """
    Authenticated user extracted from the access token.

    This is the minimal user info available from the token itself,
    without querying the database.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    email: str | None = None
    role: UserRole = UserRole.CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class TokenPayload(BaseModel):
    """Decoded access token claims."""
    sub: str  # User ID
    email: str | None = None
    role: UserRole = UserRole.CUSTOMER
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
