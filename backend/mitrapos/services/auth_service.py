"""
Mitra POS Backend — Auth Service
==================================

What:  Username/password login that issues a signed JWT.
How:   Looks the user up by username, compares the stored password for
       equality, and signs {id, username, iat, exp} with PyJWT (HS256).

Scope:
    This is the only authentication the service performs. Tokens are issued
    for the frontend to hold; no endpoint here requires one. Unknown users
    and wrong passwords produce the same AuthError so the response does not
    reveal which usernames exist.
"""

import datetime as dt
import hmac
import logging
from typing import Any, Dict

import jwt
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mitrapos.config import settings
from mitrapos.exceptions import AuthError, DatabaseError
from mitrapos.models.partner import User
from mitrapos.schemas.partner import UserResponse
from mitrapos.schemas.utility import LoginResult

logger = logging.getLogger(__name__)


class AuthService:
    async def login(self, db: AsyncSession, username: str, password: str) -> LoginResult:
        """
        Raises:
            AuthError:     unknown username or wrong password (→ 401)
            DatabaseError: the user lookup failed (→ 500)
        """
        try:
            result = await db.execute(select(User).where(User.username == username))
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error looking up user for login: %s", str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})

        if user is None or not hmac.compare_digest(
            user.password.encode("utf-8"), password.encode("utf-8")
        ):
            logger.warning("Failed login for username=%s", username)
            raise AuthError()

        logger.info("User %s logged in", user.id)
        return LoginResult(
            token=self.issue_token(user),
            user=UserResponse.model_validate(user),
        )

    def issue_token(self, user: User) -> str:
        now = dt.datetime.now(dt.timezone.utc)
        payload: Dict[str, Any] = {
            "id": user.id,
            "username": user.username,
            "iat": int(now.timestamp()),
            "exp": int((now + dt.timedelta(minutes=settings.jwt_expires_minutes)).timestamp()),
        }
        return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


auth_service = AuthService()
