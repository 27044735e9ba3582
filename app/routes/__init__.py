#app/routes/__init__.py

from .staff import router as staff_router
from .vehicle import router as vehicle_router
