# =============================================================================
# app/auth/dependencies.py - Tokens and FastAPI Auth Dependencies
# =============================================================================
# Issues and verifies HS256 access tokens signed with JWT_SECRET.
#
# Usage:
#   from app.auth import get_current_user, require_admin, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from app.auth.models import AuthUser, TokenPayload
from app.config import Settings
from app.dependencies import get_app_settings
from app.exceptions import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

# Errors are raised by get_current_user so they share the JSON error envelope
security = HTTPBearer(auto_error=False)


def create_access_token(user: dict[str, Any], settings: Settings) -> str:
    """
    Sign an access token for a user document.

    Args:
        user: Serialized user dict (id, email, role)
        settings: Supplies JWT_SECRET and JWT_EXPIRES_MINUTES
    """
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user["id"],
        "email": user.get("email"),
        "role": user.get("role", "customer"),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.JWT_EXPIRES_MINUTES)).timestamp()),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> AuthUser:
    """
    Verify a token and return the user it names.

    Raises:
        UnauthorizedError: If the token is expired, malformed or badly signed
    """
    try:
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
        payload = TokenPayload(**claims)
    except ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except (JWTError, ValidationError) as e:
        logger.warning(f"Rejected access token: {e}")
        raise UnauthorizedError("Invalid token")

    return AuthUser(id=payload.sub, email=payload.email, role=payload.role)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_app_settings),
) -> AuthUser:
    """
    Extract and validate the user from the Bearer token.

    Raises:
        UnauthorizedError: 401 if the token is missing or invalid
    """
    if credentials is None:
        raise UnauthorizedError("Not authorized, no token")

    user = decode_access_token(credentials.credentials, settings)
    logger.debug(f"Authenticated user: {user.id}")
    return user


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_app_settings),
) -> Optional[AuthUser]:
    """
    Optionally get the current user from the Bearer token.

    Returns None if no token is provided, instead of raising an error.
    An invalid token is treated as anonymous access.
    """
    if credentials is None:
        return None

    try:
        return decode_access_token(credentials.credentials, settings)
    except UnauthorizedError:
        return None


async def require_admin(user: AuthUser = Depends(get_current_user)) -> AuthUser:
    """
    Allow only admin tokens.

    Raises:
        ForbiddenError: 403 if the user is not an admin
    """
    if not user.is_admin:
        raise ForbiddenError()
    return user
