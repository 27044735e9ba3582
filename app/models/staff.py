# app/models/staff.py
from typing import List
from pydantic import BaseModel, Field

class QualificationModel(BaseModel):
    qualification: str
    type: str

class StaffModel(BaseModel):
    id: str = Field(default="", alias="_id")
    staffNumber: str
    name: str
    qualifications: List[QualificationModel] = []

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True
