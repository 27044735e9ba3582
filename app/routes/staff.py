# app/routes/staff.py
from typing import List
from fastapi import APIRouter, Depends, Response, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.database import get_database
from app.errors import RecordNotFound, ValidationFailure, request_failure
from app.schemas.staff import QualificationIn, StaffCreate, StaffOut, StaffUpdate
from app.services.staff_service import StaffRegistry

router = APIRouter()

def get_staff_registry(db: AsyncIOMotorDatabase = Depends(get_database)) -> StaffRegistry:
    return StaffRegistry(db)

@router.get("/staff", response_model=List[StaffOut])
async def list_staff(registry: StaffRegistry = Depends(get_staff_registry)):
    try:
        return await registry.list_staff()
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to retrieve staff members", e)

@router.post("/staff", response_model=StaffOut, status_code=status.HTTP_201_CREATED)
async def create_staff(staff: StaffCreate, registry: StaffRegistry = Depends(get_staff_registry)):
    try:
        return await registry.create_staff(staff)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to create staff member", e, status.HTTP_400_BAD_REQUEST)

@router.get("/staff/{staff_number}", response_model=StaffOut)
async def get_staff(staff_number: str, registry: StaffRegistry = Depends(get_staff_registry)):
    try:
        return await registry.get_staff(staff_number)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to retrieve staff member", e)

@router.put("/staff/{staff_number}", response_model=StaffOut)
async def update_staff(staff_number: str, staff: StaffUpdate, registry: StaffRegistry = Depends(get_staff_registry)):
    try:
        return await registry.update_staff(staff_number, staff)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to update staff member", e, status.HTTP_400_BAD_REQUEST)

@router.delete("/staff/{staff_number}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_staff(staff_number: str, registry: StaffRegistry = Depends(get_staff_registry)):
    try:
        await registry.delete_staff(staff_number)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to delete staff member", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/staff/{staff_number}/qualifications", response_model=StaffOut)
async def add_qualification(
    staff_number: str,
    qualification: QualificationIn,
    registry: StaffRegistry = Depends(get_staff_registry)
):
    try:
        return await registry.add_qualification(staff_number, qualification)
    except (ValidationFailure, RecordNotFound):
        raise
    except Exception as e:
        raise request_failure("Failed to add qualification", e, status.HTTP_400_BAD_REQUEST)
