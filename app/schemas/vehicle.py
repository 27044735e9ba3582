# app/schemas/vehicle.py
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from app.models.vehicle import VehicleStatus

class VehicleBase(BaseModel):
    vin: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    mileage: Union[int, float]
    driver: str = Field(..., min_length=1, description="Name or ID of the assigned driver")

class VehicleCreate(VehicleBase):
    status: VehicleStatus = VehicleStatus.AVAILABLE

class VehicleUpdate(BaseModel):
    """Partial update; only the fields sent by the client are applied."""
    vin: Optional[str] = Field(None, min_length=1)
    model: Optional[str] = Field(None, min_length=1)
    mileage: Optional[Union[int, float]] = None
    driver: Optional[str] = Field(None, min_length=1)
    status: Optional[VehicleStatus] = None

class VehicleOut(BaseModel):
    id: str
    vin: str
    model: str
    mileage: Union[int, float]
    driver: str
    status: VehicleStatus

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
