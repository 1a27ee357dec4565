"""
Schemas module - Request/Response schemas for API endpoints.
"""

from smartclass.schemas.schemas import (
    SignupRequest, LoginRequest, TeacherLogin, StandardLogin,
    TokenResponse, MessageResponse, to_document
)

__all__ = [
    "SignupRequest", "LoginRequest", "TeacherLogin", "StandardLogin",
    "TokenResponse", "MessageResponse", "to_document",
]
