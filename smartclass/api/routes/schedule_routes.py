"""
Timetable Routes

GET    /schedules       - All entries, every grade
POST   /schedules       - Replace one grade's timetable: {grade, schedules: [...]}
PUT    /schedules/{id}  - Update one entry
DELETE /schedules/{id}  - Delete one entry
DELETE /schedules       - Delete every entry of every grade
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from smartclass.core.auth import data_gate
from smartclass.db.mongodb import get_db
from smartclass.schemas.schemas import (
    ScheduleBody, ScheduleReplaceRequest, MessageResponse, to_document
)
from smartclass.services.mongo_service import ScheduleService

router = APIRouter(prefix="/schedules", tags=["Timetable"], dependencies=[Depends(data_gate)])


@router.get("")
def list_schedules(db: Database = Depends(get_db)):
    return ScheduleService(db).list()


@router.post("")
def replace_grade_schedule(data: ScheduleReplaceRequest, db: Database = Depends(get_db)):
    """
    Replace the whole timetable of `grade`.

    Existing entries of that grade are deleted first; any slot missing
    from `schedules` is gone afterwards. Other grades are untouched.
    """
    entries = [to_document(entry) for entry in data.schedules]
    return ScheduleService(db).replace_for_grade(data.grade, entries)


@router.put("/{schedule_id}")
def update_schedule(schedule_id: str, body: ScheduleBody, db: Database = Depends(get_db)):
    return ScheduleService(db).update(schedule_id, to_document(body, partial=True))


@router.delete("/{schedule_id}")
def delete_schedule(schedule_id: str, db: Database = Depends(get_db)):
    return ScheduleService(db).delete(schedule_id)


@router.delete("", response_model=MessageResponse)
def clear_schedules(db: Database = Depends(get_db)):
    """Delete every schedule entry. No confirmation step."""
    ScheduleService(db).clear_all()
    return MessageResponse(message="All schedules deleted")
