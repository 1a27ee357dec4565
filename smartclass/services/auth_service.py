"""
Auth Service - signup and role-dispatched login.

Login is a tagged union on `role`:
- TeacherLogin  -> faculty lookup + derived password
- StandardLogin -> users collection + bcrypt

TEACHER PASSWORDS ARE NOT SECRETS:
A teacher's password is computed from their faculty name (first letter,
upper-cased, then "1234"). Anyone who knows a teacher's name can log in
as them. Kept exactly as-is for compatibility with existing clients;
replacing it must be a separate, versioned policy change.
"""

import logging
import secrets

from pymongo.database import Database

from smartclass.core.auth import hash_password, verify_password, create_access_token
from smartclass.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from smartclass.schemas.schemas import SignupRequest, TeacherLogin, StandardLogin
from smartclass.services.mongo_service import FacultyService, UserService

logger = logging.getLogger(__name__)

TEACHER_PASSWORD_SUFFIX = "1234"


def teacher_password(faculty_name: str) -> str:
    """
    The password a teacher must submit, derived from their name.
    Returns "" for a blank name, which never matches a submitted password.
    """
    name = (faculty_name or "").strip()
    if not name:
        return ""
    return name[0].upper() + TEACHER_PASSWORD_SUFFIX


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:

    def __init__(self, db: Database):
        self.users = UserService(db)
        self.faculty = FacultyService(db)

    def signup(self, request: SignupRequest) -> None:
        """Create a student/admin account. Never returns the record."""
        email = normalize_email(request.email)

        if self.users.find_by_email(email):
            logger.info("Signup rejected, email already registered: %s", email)
            raise ConflictError("User already exists")

        self.users.create(
            role=request.role.value,
            name=request.name,
            email=email,
            password_hash=hash_password(request.password)
        )
        logger.info("User created: %s (%s)", email, request.role.value)

    def login(self, request) -> dict:
        """Dispatch on the login variant. Returns {token, role, name}."""
        if isinstance(request, TeacherLogin):
            return self._teacher_login(request)
        return self._standard_login(request)

    def _teacher_login(self, request: TeacherLogin) -> dict:
        faculty = self.faculty.find_by_name(request.email)
        if not faculty:
            logger.info("Teacher login failed, no faculty named %r", request.email)
            raise NotFoundError("Faculty not found")

        expected = teacher_password(faculty.get("name"))
        if not expected or not secrets.compare_digest(request.password.encode(), expected.encode()):
            logger.info("Teacher login failed, wrong password for %r", faculty.get("name"))
            raise InvalidCredentialsError("Invalid password")

        name = faculty["name"]
        token = create_access_token(data={"role": "teacher", "name": name})
        logger.info("Teacher logged in: %s", name)
        return {"token": token, "role": "teacher", "name": name}

    def _standard_login(self, request: StandardLogin) -> dict:
        email = normalize_email(request.email)
        user = self.users.find_by_email_and_role(email, request.role)
        if not user or not verify_password(request.password, user.get("password", "")):
            logger.info("Login failed for %s (%s)", email, request.role)
            raise InvalidCredentialsError("Invalid credentials")

        name = user.get("name") or user["email"]
        token = create_access_token(data={"id": str(user["_id"]), "role": user["role"], "name": name})
        logger.info("User logged in: %s (%s)", email, user["role"])
        return {"token": token, "role": user["role"], "name": name}
