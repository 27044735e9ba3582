# app/services/vehicle_service.py
"""
Vehicle Registry: vehicle records keyed by ``vin``.

Status values are limited to ``VehicleStatus`` but any status may move to any
other. Mileage is stored as given.
"""

import re
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.database import VEHICLE_COLLECTION
from app.errors import RecordNotFound, ValidationFailure
from app.models.vehicle import VehicleModel
from app.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from app.utils.logger import get_logger

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Vehicle not found"
NON_NULLABLE_FIELDS = ("vin", "model", "mileage", "driver", "status")


def to_vehicle_out(document: Dict[str, Any]) -> VehicleOut:
    stored = VehicleModel(**{**document, "_id": str(document["_id"])})
    return VehicleOut(**stored.model_dump())


class VehicleRegistry:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[VEHICLE_COLLECTION]

    def _not_found(self, vin: str) -> RecordNotFound:
        return RecordNotFound(NOT_FOUND_MESSAGE, f"No vehicle found with VIN: {vin}")

    async def search_vehicles(self, term: Optional[str] = None) -> List[VehicleOut]:
        query = {"vin": {"$regex": re.escape(term), "$options": "i"}} if term else {}
        documents = await self.collection.find(query).to_list(length=None)
        return [to_vehicle_out(document) for document in documents]

    async def get_vehicle(self, vin: str) -> VehicleOut:
        document = await self.collection.find_one({"vin": vin})
        if document is None:
            raise self._not_found(vin)
        return to_vehicle_out(document)

    async def create_vehicle(self, payload: VehicleCreate) -> VehicleOut:
        vehicle_dict = payload.model_dump(mode="json")
        try:
            await self.collection.insert_one(vehicle_dict)
        except DuplicateKeyError:
            raise ValidationFailure(
                "VIN already registered",
                f"Vehicle with VIN '{payload.vin}' already exists",
            )
        logger.info("Created vehicle %s", payload.vin)
        # insert_one sets _id on the dict it was given
        return to_vehicle_out(vehicle_dict)

    async def update_vehicle(self, vin: str, patch: VehicleUpdate) -> VehicleOut:
        changes = patch.model_dump(mode="json", exclude_unset=True)
        missing = [field for field in NON_NULLABLE_FIELDS if field in changes and changes[field] is None]
        if missing:
            raise ValidationFailure(
                "Invalid vehicle update",
                f"Field(s) {', '.join(missing)} cannot be null",
            )

        if not changes:
            return await self.get_vehicle(vin)

        try:
            updated = await self.collection.find_one_and_update(
                {"vin": vin},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ValidationFailure(
                "VIN already registered",
                f"VIN '{changes.get('vin')}' is already assigned to another vehicle",
            )

        if updated is None:
            raise self._not_found(vin)

        logger.info("Updated vehicle %s (%s)", vin, ", ".join(changes))
        return to_vehicle_out(updated)

    async def delete_vehicle(self, vin: str) -> None:
        deleted = await self.collection.find_one_and_delete({"vin": vin})
        if deleted is None:
            raise self._not_found(vin)
        logger.info("Deleted vehicle %s", vin)
