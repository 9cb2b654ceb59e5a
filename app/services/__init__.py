"""
Сервисный слой для бизнес-логики.
"""
from app.services.sentinel_service import SentinelService
from app.services.department_service import DepartmentService
from app.services.position_service import PositionService
from app.services.specialization_service import SpecializationService
from app.services.employee_service import EmployeeService
from app.services.equipment_service import EquipmentService, EquipmentCategoryService
from app.services.utility_payment_service import UtilityPaymentService
from app.services.fuel_service import FuelService
from app.services.schedule_service import ScheduleService

__all__ = [
    "SentinelService",
    "DepartmentService",
    "PositionService",
    "SpecializationService",
    "EmployeeService",
    "EquipmentService",
    "EquipmentCategoryService",
    "UtilityPaymentService",
    "FuelService",
    "ScheduleService",
]
