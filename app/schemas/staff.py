# app/schemas/staff.py
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class QualificationIn(BaseModel):
    qualification: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)

class QualificationOut(BaseModel):
    qualification: str
    type: str

class StaffBase(BaseModel):
    staffNumber: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

class StaffCreate(StaffBase):
    qualifications: List[QualificationIn] = Field(default_factory=list)

class StaffUpdate(BaseModel):
    """Partial update; only the fields sent by the client are applied."""
    staffNumber: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    qualifications: Optional[List[QualificationIn]] = None

class StaffOut(BaseModel):
    id: str
    staffNumber: str
    name: str
    qualifications: List[QualificationOut] = []

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
