from .staff import StaffModel, QualificationModel
from .vehicle import VehicleModel, VehicleStatus
