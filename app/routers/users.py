# =============================================================================
# app/routers/users.py - User Account Endpoints
# =============================================================================
# Registration and login return an access token alongside the profile.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.auth import AuthUser, create_access_token, get_current_user, require_admin
from app.dependencies import PaginationDep, SettingsDep, get_user_service, paginate
from core.models.common import Page
from core.models.user import AuthResponse, RoleUpdate, UserLogin, UserRegister, UserResponse
from core.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()

ServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(payload: UserRegister, service: ServiceDep, settings: SettingsDep):
    """Create a customer account and log it in."""
    user = await service.register(payload)
    return AuthResponse(user=UserResponse(**user), token=create_access_token(user, settings))


@router.post("/login", response_model=AuthResponse)
async def login(payload: UserLogin, service: ServiceDep, settings: SettingsDep):
    """Exchange email and password for an access token."""
    user = await service.authenticate(payload.email, payload.password)
    logger.info(f"User {user['id']} logged in")
    return AuthResponse(user=UserResponse(**user), token=create_access_token(user, settings))


@router.get("/me", response_model=UserResponse)
async def get_me(service: ServiceDep, user: AuthUser = Depends(get_current_user)):
    """Profile of the authenticated user."""
    return await service.get(user.id)


@router.get("", response_model=Page[UserResponse], dependencies=[Depends(require_admin)])
async def list_users(response: Response, service: ServiceDep, pagination: PaginationDep):
    items, total = await service.list_users(skip=pagination.skip, limit=pagination.limit)
    return paginate(response, "users", pagination, items, total)


@router.put("/{user_id}/role", response_model=UserResponse, dependencies=[Depends(require_admin)])
async def set_role(user_id: str, payload: RoleUpdate, service: ServiceDep):
    """Promote or demote a user."""
    return await service.set_role(user_id, payload.role)
