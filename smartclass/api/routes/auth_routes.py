"""
Authentication Routes

POST /signup - Create a student/admin account (admin token needed when gated)
POST /login  - Login and get JWT token
GET  /me     - Claims of the current token
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from smartclass.db.mongodb import get_db
from smartclass.core.auth import get_current_user, signup_gate
from smartclass.services.auth_service import AuthService
from smartclass.schemas.schemas import (
    SignupRequest, LoginRequest, TokenResponse, MessageResponse
)

router = APIRouter(tags=["Authentication"])


@router.post("/signup", response_model=MessageResponse, dependencies=[Depends(signup_gate)])
def signup(request: SignupRequest, db: Database = Depends(get_db)):
    """
    Create a student or admin account.

    Teachers are not stored here; they log in with their faculty name.
    """
    AuthService(db).signup(request)
    return MessageResponse(message="User created")


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Database = Depends(get_db)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    return AuthService(db).login(request)


@router.get("/me")
def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's token claims."""
    return user
