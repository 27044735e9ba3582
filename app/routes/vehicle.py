# app/routes/vehicle.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.database import get_database
from app.errors import RecordNotFound, ValidationFailure, request_failure
from app.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from app.services.vehicle_service import VehicleRegistry

router = APIRouter()

def get_vehicle_registry(db: AsyncIOMotorDatabase = Depends(get_database)) -> VehicleRegistry:
    return VehicleRegistry(db)

@router.post("/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED)
async def create_vehicle(vehicle: VehicleCreate, registry: VehicleRegistry = Depends(get_vehicle_registry)):
    try:
        return await registry.create_vehicle(vehicle)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to create vehicle", e, status.HTTP_400_BAD_REQUEST)

@router.get("/vehicles", response_model=List[VehicleOut])
async def search_vehicles(
    search: Optional[str] = None,
    registry: VehicleRegistry = Depends(get_vehicle_registry)
):
    """List vehicles, optionally only those whose VIN contains `search` (case-insensitive)"""
    try:
        return await registry.search_vehicles(search)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to retrieve vehicles", e)

@router.get("/vehicles/{vin}", response_model=VehicleOut)
async def get_vehicle(vin: str, registry: VehicleRegistry = Depends(get_vehicle_registry)):
    try:
        return await registry.get_vehicle(vin)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to retrieve vehicle", e)

@router.put("/vehicles/{vin}", response_model=VehicleOut)
async def update_vehicle(vin: str, vehicle: VehicleUpdate, registry: VehicleRegistry = Depends(get_vehicle_registry)):
    try:
        return await registry.update_vehicle(vin, vehicle)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to update vehicle", e, status.HTTP_400_BAD_REQUEST)

@router.delete("/vehicles/{vin}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(vin: str, registry: VehicleRegistry = Depends(get_vehicle_registry)):
    try:
        await registry.delete_vehicle(vin)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to delete vehicle", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
