"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification
- FastAPI dependencies for the token gate
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from smartclass.core.config import get_settings
from smartclass.core.errors import Unauthorized, Forbidden

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)

# Bearer token extractor. Returns None for a missing or non-Bearer header;
# get_current_user turns that into a 401.
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash (constant time inside bcrypt)."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Stored value is not a bcrypt hash
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token. Expired or tampered tokens give None."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> dict:
    """
    FastAPI dependency - the token gate.

    Usage:
        @router.get("/protected")
        def route(user: dict = Depends(get_current_user)):
            return user

    The decoded claims are also left on request.state.user.
    """
    if credentials is None:
        raise Unauthorized("No token")

    payload = decode_token(credentials.credentials)
    if not payload or not payload.get("role"):
        raise Unauthorized("Invalid token")

    request.state.user = payload
    return payload


async def get_current_admin(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require admin role."""
    if user["role"] != "admin":
        raise Forbidden("Only admin allowed")
    return user


async def signup_gate(request: Request) -> Optional[dict]:
    """
    Gate for POST /signup.
    Only applied when auth_gate is "signup" or "all"; then an admin token is required.
    """
    if get_settings().auth_gate == "none":
        return None
    credentials = await bearer_scheme(request)
    user = await get_current_user(request, credentials)
    return await get_current_admin(user)


async def data_gate(request: Request) -> Optional[dict]:
    """
    Gate for every collection, schedule and swap route.
    Only applied when auth_gate is "all"; then any valid token is enough.
    """
    if get_settings().auth_gate != "all":
        return None
    credentials = await bearer_scheme(request)
    return await get_current_user(request, credentials)
