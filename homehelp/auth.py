"""
Identity resolution and credential helpers.

Routes depend on get_current_user_id, which delegates to the configured
IdentityResolver:
- TokenIdentityResolver: HS256 JWT bearer tokens issued at login
- FixedIdentityResolver: always DEFAULT_USER_ID (AUTH_MODE=none, demo/testing only)
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError
from jose import jwt as jose_jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from .config import AUTH_MODE, BCRYPT_ROUNDS, DEFAULT_USER_ID, SECRET_KEY, SESSION_TOKEN_TTL_SECONDS
from .database import get_db
from .errors import UnauthenticatedError
from .models import User

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

ALGORITHM = "HS256"

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.warning(f"⚠️ Password verification error: {e}")
        return False


def create_session_token(user_id: int, ttl_seconds: Optional[int] = None) -> str:
    """Issue a signed JWT bearer token for user_id"""
    ttl = SESSION_TOKEN_TTL_SECONDS if ttl_seconds is None else ttl_seconds
    expire = datetime.now(timezone.utc) + timedelta(seconds=ttl)
    return jose_jwt.encode({"sub": str(user_id), "exp": expire}, SECRET_KEY, algorithm=ALGORITHM)


def verify_session_token(token: str) -> int:
    """
    Verify a bearer token and return its user id.

    Raises:
        UnauthenticatedError: malformed, tampered or expired token
    """
    try:
        payload = jose_jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError as e:
        raise UnauthenticatedError("Token has expired. Please sign in again.") from e
    except JWTError as e:
        logger.warning(f"⚠️ JWT verification failed: {e}")
        raise UnauthenticatedError("Invalid token") from e

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"⚠️ Token has no usable subject: {e}")
        raise UnauthenticatedError("Invalid token claims") from e


class IdentityResolver:
    """Maps an incoming request to a user id"""

    def resolve(self, request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> int:
        raise NotImplementedError


class TokenIdentityResolver(IdentityResolver):
    def resolve(self, request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> int:
        if not credentials or not credentials.credentials:
            raise UnauthenticatedError(
                "Not authenticated. Please provide a valid Bearer token in the Authorization header."
            )
        return verify_session_token(credentials.credentials)


class FixedIdentityResolver(IdentityResolver):
    """Resolves every request to the same user; never use in production"""

    def __init__(self, user_id: int = DEFAULT_USER_ID):
        self.user_id = user_id

    def resolve(self, request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> int:
        return self.user_id


_token_resolver = TokenIdentityResolver()


def get_identity_resolver() -> IdentityResolver:
    """Dependency returning the resolver selected by AUTH_MODE"""
    if AUTH_MODE == "none":
        return FixedIdentityResolver(DEFAULT_USER_ID)
    return _token_resolver


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> int:
    """Resolve the calling user's id or fail with 401"""
    user_id = resolver.resolve(request, credentials)
    request.state.user_id = user_id
    return user_id


async def get_optional_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> Optional[int]:
    """Like get_current_user_id, but anonymous callers get None instead of 401"""
    try:
        return resolver.resolve(request, credentials)
    except UnauthenticatedError:
        return None


async def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Load the calling user's record"""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.warning(f"⚠️ Token resolved to unknown user {user_id}")
        raise UnauthenticatedError("User not found")
    return user
