# app/services/staff_service.py
"""
Staff Registry: staff records and their embedded qualification lists.

Identity is the ``staffNumber`` field. Uniqueness is enforced by the unique
index created in ``init_db``; a ``DuplicateKeyError`` from the driver is
reported as a ``ValidationFailure``.
"""

from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.database import STAFF_COLLECTION
from app.errors import RecordNotFound, ValidationFailure
from app.models.staff import StaffModel
from app.schemas.staff import QualificationIn, StaffCreate, StaffOut, StaffUpdate
from app.utils.logger import get_logger

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Staff member not found"
NON_NULLABLE_FIELDS = ("staffNumber", "name", "qualifications")


def to_staff_out(document: Dict[str, Any]) -> StaffOut:
    stored = StaffModel(**{**document, "_id": str(document["_id"])})
    return StaffOut(**stored.model_dump())


class StaffRegistry:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[STAFF_COLLECTION]

    def _not_found(self, staff_number: str) -> RecordNotFound:
        return RecordNotFound(
            NOT_FOUND_MESSAGE,
            f"No staff member found with staff number: {staff_number}",
        )

    async def list_staff(self) -> List[StaffOut]:
        documents = await self.collection.find({}).to_list(length=None)
        return [to_staff_out(document) for document in documents]

    async def get_staff(self, staff_number: str) -> StaffOut:
        document = await self.collection.find_one({"staffNumber": staff_number})
        if document is None:
            raise self._not_found(staff_number)
        return to_staff_out(document)

    async def create_staff(self, payload: StaffCreate) -> StaffOut:
        staff_dict = payload.model_dump()
        try:
            await self.collection.insert_one(staff_dict)
        except DuplicateKeyError:
            raise ValidationFailure(
                "Staff number already registered",
                f"Staff member with staff number '{payload.staffNumber}' already exists",
            )
        logger.info("Created staff member %s", payload.staffNumber)
        # insert_one sets _id on the dict it was given
        return to_staff_out(staff_dict)

    async def update_staff(self, staff_number: str, patch: StaffUpdate) -> StaffOut:
        changes = patch.model_dump(exclude_unset=True)
        missing = [field for field in NON_NULLABLE_FIELDS if field in changes and changes[field] is None]
        if missing:
            raise ValidationFailure(
                "Invalid staff update",
                f"Field(s) {', '.join(missing)} cannot be null",
            )

        if not changes:
            return await self.get_staff(staff_number)

        try:
            updated = await self.collection.find_one_and_update(
                {"staffNumber": staff_number},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ValidationFailure(
                "Staff number already registered",
                f"Staff number '{changes.get('staffNumber')}' is already assigned to another staff member",
            )

        if updated is None:
            raise self._not_found(staff_number)

        logger.info("Updated staff member %s (%s)", staff_number, ", ".join(changes))
        return to_staff_out(updated)

    async def delete_staff(self, staff_number: str) -> None:
        deleted = await self.collection.find_one_and_delete({"staffNumber": staff_number})
        if deleted is None:
            raise self._not_found(staff_number)
        logger.info("Deleted staff member %s", staff_number)

    async def add_qualification(self, staff_number: str, entry: QualificationIn) -> StaffOut:
        # Appends to the end; existing entries are never touched
        updated = await self.collection.find_one_and_update(
            {"staffNumber": staff_number},
            {"$push": {"qualifications": entry.model_dump()}},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            raise self._not_found(staff_number)

        logger.info("Added qualification '%s' to staff member %s", entry.qualification, staff_number)
        return to_staff_out(updated)
