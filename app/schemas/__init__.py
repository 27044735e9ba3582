# app/schemas/__init__.py
from .staff import StaffCreate, StaffUpdate, StaffOut, QualificationIn, QualificationOut
from .vehicle import VehicleCreate, VehicleUpdate, VehicleOut
