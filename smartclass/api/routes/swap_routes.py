"""
Swap Request Routes

GET    /swaps              - All swap requests
POST   /swaps              - Create a request (always starts pending)
PUT    /swaps/{id}/approve - Approve; hands the slot to toFaculty
PUT    /swaps/{id}/reject  - Reject; timetable untouched
DELETE /swaps/{id}         - Delete regardless of status
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from smartclass.core.auth import data_gate
from smartclass.db.mongodb import get_db
from smartclass.schemas.schemas import SwapBody, to_document
from smartclass.services.mongo_service import SwapService

router = APIRouter(prefix="/swaps", tags=["Swaps"], dependencies=[Depends(data_gate)])


@router.get("")
def list_swaps(db: Database = Depends(get_db)):
    return SwapService(db).list()


@router.post("")
def create_swap(body: SwapBody, db: Database = Depends(get_db)):
    return SwapService(db).create(to_document(body))


@router.put("/{swap_id}/approve")
def approve_swap(swap_id: str, db: Database = Depends(get_db)):
    """
    Approve a pending swap.

    If toFaculty is set, the schedule entry for (grade, day, time)
    taught by fromFaculty is reassigned to toFaculty.
    """
    return SwapService(db).approve(swap_id)


@router.put("/{swap_id}/reject")
def reject_swap(swap_id: str, db: Database = Depends(get_db)):
    return SwapService(db).reject(swap_id)


@router.delete("/{swap_id}")
def delete_swap(swap_id: str, db: Database = Depends(get_db)):
    return SwapService(db).delete(swap_id)
