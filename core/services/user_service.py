# =============================================================================
# core/services/user_service.py - User Accounts
# =============================================================================
# Registration, credential checks and role management.
#
# Passwords are stored as "pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>".
# Emails listed in ADMIN_EMAILS are registered with the admin role so a
# fresh deployment can bootstrap its first administrator.
# =============================================================================

import hashlib
import hmac
import logging
import secrets
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.exceptions import ConflictError, UnauthorizedError
from core.models.user import UserRegister, UserRole
from core.services.repository import MongoRepository

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 260_000


def hash_password(password: str, iterations: int = PBKDF2_ITERATIONS) -> str:
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"pbkdf2_sha256${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest_hex = stored.split("$")
    except ValueError:
        return False
    if algorithm != "pbkdf2_sha256":
        return False

    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        bytes.fromhex(salt_hex),
        int(iterations),
    )
    return hmac.compare_digest(digest.hex(), digest_hex)


class UserService(MongoRepository):
    """Service for storefront user accounts."""

    collection_name = "users"
    resource = "user"

    def __init__(self, db: AsyncIOMotorDatabase, admin_emails: list[str] | None = None):
        super().__init__(db)
        self.admin_emails = {email.strip().lower() for email in admin_emails or [] if email.strip()}

    async def register(self, payload: UserRegister) -> dict[str, Any]:
        """
        Create an account.

        Raises:
            ConflictError: If the email is already registered
        """
        if await self.exists({"email": payload.email}):
            raise ConflictError(
                f"Email already registered: {payload.email}",
                code="EMAIL_TAKEN",
                details={"email": payload.email},
            )

        role = UserRole.ADMIN if payload.email in self.admin_emails else UserRole.CUSTOMER
        user = await self.create({
            "name": payload.name,
            "email": payload.email,
            "phone": payload.phone,
            "password_hash": hash_password(payload.password),
            "role": role.value,
        })

        logger.info(f"Registered user {user['id']} ({role.value})")
        return user

    async def authenticate(self, email: str, password: str) -> dict[str, Any]:
        """
        Check credentials.

        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong
        """
        doc = await self.collection.find_one({"email": email})
        if doc is None or not verify_password(password, doc.get("password_hash", "")):
            logger.warning(f"Failed login for {email}")
            raise UnauthorizedError("Invalid email or password")

        return await self.get(str(doc["_id"]))

    async def list_users(self, skip: int = 0, limit: int = 20) -> tuple[list[dict[str, Any]], int]:
        return await self.find_page({}, skip=skip, limit=limit, sort=[("created_at", -1)])

    async def set_role(self, user_id: str, role: UserRole) -> dict[str, Any]:
        return await self.update(user_id, {"role": role.value})
