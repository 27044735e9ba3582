# app/models/vehicle.py
from enum import Enum
from typing import Union
from pydantic import BaseModel, Field

class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    IN_USE = "in use"
    ON_SERVICE = "on service"
    SOLD_ON_AUCTION = "sold on auction"

class VehicleModel(BaseModel):
    id: str = Field(default="", alias="_id")
    vin: str
    model: str
    mileage: Union[int, float]
    driver: str
    status: VehicleStatus = VehicleStatus.AVAILABLE

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True
        use_enum_values = True
