"""
Collection Routes - the plain CRUD entities.

For each entity:
GET    /<entity>       - List all documents
POST   /<entity>       - Create a document
PUT    /<entity>/{id}  - Update fields (not for feedback, which is append-only)
DELETE /<entity>/{id}  - Delete a document

Entities: faculty, grades, classrooms, labs, subjects, leaves, feedback
"""

from typing import Callable, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from pymongo.database import Database

from smartclass.core.auth import data_gate
from smartclass.db.mongodb import get_db
from smartclass.schemas.schemas import (
    FacultyBody, GradeBody, RoomBody, SubjectBody, LeaveBody, FeedbackBody, to_document
)
from smartclass.services.mongo_service import CollectionService, FacultyService, LeaveService


def build_crud_router(
    prefix: str,
    tag: str,
    body_model: Type[BaseModel],
    service_factory: Callable[[Database], CollectionService],
    allow_update: bool = True,
) -> APIRouter:
    """Wire list/create/update/delete for one collection onto a router."""
    router = APIRouter(prefix=f"/{prefix}", tags=[tag], dependencies=[Depends(data_gate)])

    @router.get("")
    def list_documents(db: Database = Depends(get_db)):
        return service_factory(db).list()

    @router.post("")
    def create_document(body: body_model, db: Database = Depends(get_db)):
        return service_factory(db).create(to_document(body))

    if allow_update:
        @router.put("/{doc_id}")
        def update_document(doc_id: str, body: body_model, db: Database = Depends(get_db)):
            return service_factory(db).update(doc_id, to_document(body, partial=True))

    @router.delete("/{doc_id}")
    def delete_document(doc_id: str, db: Database = Depends(get_db)):
        return service_factory(db).delete(doc_id)

    return router


faculty_router = build_crud_router("faculty", "Faculty", FacultyBody, FacultyService)

grade_router = build_crud_router(
    "grades", "Grades", GradeBody,
    lambda db: CollectionService(db, "grades", "Grade")
)

classroom_router = build_crud_router(
    "classrooms", "Classrooms", RoomBody,
    lambda db: CollectionService(db, "classrooms", "Classroom")
)

lab_router = build_crud_router(
    "labs", "Labs", RoomBody,
    lambda db: CollectionService(db, "labs", "Lab")
)

subject_router = build_crud_router(
    "subjects", "Subjects", SubjectBody,
    lambda db: CollectionService(db, "subjects", "Subject")
)

leave_router = build_crud_router("leaves", "Leaves", LeaveBody, LeaveService)

feedback_router = build_crud_router(
    "feedback", "Feedback", FeedbackBody,
    lambda db: CollectionService(db, "feedback", "Feedback"),
    allow_update=False
)
