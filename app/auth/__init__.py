# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT-based authentication for storefront users.
#
# Usage:
#   from app.auth import get_current_user, require_admin, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import (
    create_access_token,
    decode_access_token,
    get_current_user,
    get_current_user_optional,
    require_admin,
)
from app.auth.models import AuthUser

__all__ = [
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_current_user_optional",
    "require_admin",
    "AuthUser",
]
