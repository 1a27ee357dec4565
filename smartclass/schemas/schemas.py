"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Entity bodies are loose: every field is optional and only
the declared type is checked. Unknown fields are ignored, so only the
declared fields ever reach MongoDB.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, List, Literal, Union
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    admin = "admin"


class RequestStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SignupRequest(BaseModel):
    role: UserRole
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class TeacherLogin(BaseModel):
    """Teachers log in with their faculty name in the email slot."""
    role: Literal["teacher"]
    email: str
    password: str


class StandardLogin(BaseModel):
    role: Literal["student", "admin"]
    email: str
    password: str


# Tagged union: the "role" literal decides which variant validates
LoginRequest = Union[TeacherLogin, StandardLogin]


class TokenResponse(BaseModel):
    token: str
    role: str
    name: str


class MessageResponse(BaseModel):
    message: str


# ============================================================
# ACADEMIC STRUCTURE
# ============================================================

class EntityBody(BaseModel):
    """Base for entity bodies. JSON numbers sent for text fields are stored as strings."""
    model_config = ConfigDict(coerce_numbers_to_str=True)


class FacultyBody(EntityBody):
    name: Optional[str] = None


class GradeBody(EntityBody):
    year: Optional[str] = None
    branch: Optional[str] = None
    section: Optional[str] = None
    shift: Optional[str] = None
    capacity: Optional[int] = None


class RoomBody(EntityBody):
    """Shared by classrooms and labs."""
    name: Optional[str] = None


class SubjectBody(EntityBody):
    grade: Optional[str] = None
    subject: Optional[str] = None
    type: Optional[str] = None
    faculty: Optional[str] = None


# ============================================================
# TIMETABLE
# ============================================================

class ScheduleBody(EntityBody):
    grade: Optional[str] = None
    subject: Optional[str] = None
    faculty: Optional[str] = None
    classroom: Optional[str] = None
    day: Optional[str] = None
    time: Optional[str] = None


class ScheduleReplaceRequest(BaseModel):
    grade: str
    schedules: List[ScheduleBody] = []


# ============================================================
# SWAPS, LEAVES, FEEDBACK
# ============================================================

class SwapBody(EntityBody):
    fromFaculty: Optional[str] = None
    toFaculty: Optional[str] = None
    grade: Optional[str] = None
    day: Optional[str] = None
    time: Optional[str] = None


class LeaveBody(EntityBody):
    # "from" is a Python keyword; the wire name stays "from"
    model_config = ConfigDict(populate_by_name=True)

    faculty: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None


class FeedbackBody(EntityBody):
    student: Optional[str] = None
    grade: Optional[str] = None
    message: Optional[str] = None
    timestamp: Optional[str] = None


def to_document(body: BaseModel, partial: bool = False) -> dict:
    """
    Dump a request body into a MongoDB document using wire field names.

    partial=True keeps only the fields the client actually sent
    (used for PUT so unspecified fields are left alone).
    """
    if partial:
        return body.model_dump(by_alias=True, exclude_unset=True)
    return body.model_dump(by_alias=True, exclude_none=True)
