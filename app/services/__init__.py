# app/services/__init__.py
from .staff_service import StaffRegistry
from .vehicle_service import VehicleRegistry
