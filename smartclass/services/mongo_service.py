"""
MongoDB Service - CRUD operations for the SmartClass collections.

Every entity gets the same four operations from CollectionService:
list, create, update, delete. Two collections add behaviour on top:

- ScheduleService: replace a grade's whole timetable, clear everything
- SwapService: approve / reject, where approval rewrites a schedule entry

Services are built per request from the database handle that the
get_db dependency provides; they hold no state of their own.
"""

import logging
import re
from typing import Optional, List
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from smartclass.core.errors import ConflictError, NotFoundError
from smartclass.db.mongodb import get_collection

logger = logging.getLogger(__name__)


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(doc_id: str) -> Optional[ObjectId]:
    """Parse an id from the URL. Returns None when it is not an ObjectId."""
    try:
        return ObjectId(doc_id)
    except (InvalidId, TypeError):
        return None


# ============================================================
# GENERIC COLLECTION
# ============================================================

class CollectionService:
    """
    List / create / update / delete over one collection.
    `label` names the entity in error messages ("Faculty not found").
    """

    def __init__(self, db: Database, name: str, label: str):
        self.collection: Collection = get_collection(db, name)
        self.label = label

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    def list(self) -> List[dict]:
        """Every document, in store order."""
        return serialize_docs(self.collection.find())

    def create(self, doc: dict) -> dict:
        """Insert a document and return it with its new _id."""
        doc = dict(doc)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def update(self, doc_id: str, fields: dict) -> dict:
        """$set the given fields; return the document after the update."""
        oid = to_object_id(doc_id)
        if oid is None:
            raise self._not_found()

        if fields:
            doc = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER
            )
        else:
            doc = self.collection.find_one({"_id": oid})

        if doc is None:
            raise self._not_found()
        return serialize_doc(doc)

    def delete(self, doc_id: str) -> dict:
        """Remove a document and return what was removed."""
        oid = to_object_id(doc_id)
        if oid is None:
            raise self._not_found()

        doc = self.collection.find_one_and_delete({"_id": oid})
        if doc is None:
            raise self._not_found()
        return serialize_doc(doc)


class FacultyService(CollectionService):

    def __init__(self, db: Database):
        super().__init__(db, "faculty", "Faculty")

    def find_by_name(self, name: str) -> Optional[dict]:
        """Whole-name match, case-insensitive."""
        return self.collection.find_one(
            {"name": {"$regex": f"^{re.escape(name)}$", "$options": "i"}}
        )


# ============================================================
# TIMETABLE
# ============================================================

class ScheduleService(CollectionService):
    """Timetable entries: one document per (grade, day, time) slot."""

    def __init__(self, db: Database):
        super().__init__(db, "schedules", "Schedule")

    def replace_for_grade(self, grade: str, entries: List[dict]) -> List[dict]:
        """
        Throw away the grade's timetable and insert `entries` in its place.

        Entries without a grade get `grade`; an entry that names its own
        grade keeps it. Not atomic: a reader between the delete and the
        insert sees the grade with no entries. Other grades are untouched.
        """
        removed = self.collection.delete_many({"grade": grade}).deleted_count

        docs = [dict(entry, grade=entry.get("grade") or grade) for entry in entries]
        if docs:
            result = self.collection.insert_many(docs)
            for doc, inserted_id in zip(docs, result.inserted_ids):
                doc["_id"] = inserted_id

        logger.info("Timetable for grade %s replaced: %d removed, %d inserted", grade, removed, len(docs))
        return serialize_docs(docs)

    def clear_all(self) -> int:
        """Delete every schedule document of every grade."""
        removed = self.collection.delete_many({}).deleted_count
        logger.warning("All schedules deleted (%d documents)", removed)
        return removed


# ============================================================
# SWAP REQUESTS
# ============================================================

class SwapService(CollectionService):
    """
    Substitute-teacher swap requests.
    pending -> approved | rejected, both terminal.
    """

    def __init__(self, db: Database):
        super().__init__(db, "swaps", "Swap request")
        self.schedules: Collection = get_collection(db, "schedules")

    def create(self, doc: dict) -> dict:
        return super().create(dict(doc, status="pending"))

    def _transition(self, oid: ObjectId, status: str) -> dict:
        """Move a pending request to `status`. Only one caller can win."""
        doc = self.collection.find_one_and_update(
            {"_id": oid, "status": "pending"},
            {"$set": {"status": status}},
            return_document=ReturnDocument.AFTER
        )
        if doc is not None:
            return doc

        existing = self.collection.find_one({"_id": oid})
        if existing is None:
            raise self._not_found()
        raise ConflictError(f"Swap request already {existing.get('status')}")

    def approve(self, swap_id: str) -> dict:
        """
        Approve the request and hand the slot to toFaculty.

        The schedule entry matching (grade, day, time, fromFaculty) gets
        its faculty rewritten. No matching entry is not an error. If the
        schedule write fails, the request goes back to pending and the
        error propagates.
        """
        oid = to_object_id(swap_id)
        if oid is None:
            raise self._not_found()

        swap = self._transition(oid, "approved")

        if swap.get("toFaculty"):
            try:
                result = self.schedules.update_one(
                    {
                        "grade": swap.get("grade"),
                        "day": swap.get("day"),
                        "time": swap.get("time"),
                        "faculty": swap.get("fromFaculty"),
                    },
                    {"$set": {"faculty": swap["toFaculty"]}}
                )
            except Exception:
                logger.error("Schedule update failed for swap %s; reverting to pending", swap_id)
                self.collection.update_one(
                    {"_id": oid, "status": "approved"},
                    {"$set": {"status": "pending"}}
                )
                raise
            if result.matched_count:
                logger.info(
                    "Swap %s approved: %s -> %s on %s %s (grade %s)",
                    swap_id, swap.get("fromFaculty"), swap["toFaculty"],
                    swap.get("day"), swap.get("time"), swap.get("grade")
                )
            else:
                logger.info("Swap %s approved; no matching schedule entry", swap_id)
        else:
            logger.info("Swap %s approved without a substitute", swap_id)

        return serialize_doc(swap)

    def reject(self, swap_id: str) -> dict:
        """Reject the request. The timetable is never touched."""
        oid = to_object_id(swap_id)
        if oid is None:
            raise self._not_found()
        swap = self._transition(oid, "rejected")
        logger.info("Swap %s rejected", swap_id)
        return serialize_doc(swap)


# ============================================================
# LEAVES
# ============================================================

class LeaveService(CollectionService):
    """Leave requests. Status is free-form and patched through update()."""

    def __init__(self, db: Database):
        super().__init__(db, "leaves", "Leave")

    def create(self, doc: dict) -> dict:
        doc = dict(doc)
        doc.setdefault("status", "pending")
        return super().create(doc)


# ============================================================
# USERS (credential store)
# ============================================================

class UserService:
    """
    Student and admin accounts. Emails are stored lower-cased and are
    unique (index created at startup).
    """

    def __init__(self, db: Database):
        self.collection: Collection = get_collection(db, "users")

    def find_by_email(self, email: str) -> Optional[dict]:
        return self.collection.find_one({"email": email})

    def find_by_email_and_role(self, email: str, role: str) -> Optional[dict]:
        return self.collection.find_one({"email": email, "role": role})

    def create(self, role: str, name: str, email: str, password_hash: str) -> str:
        """Insert an account. Raises ConflictError if the email is taken."""
        doc = {
            "role": role,
            "name": name,
            "email": email,
            "password": password_hash,
        }
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise ConflictError("User already exists")
        return str(result.inserted_id)
