"""
Модели SQLAlchemy: импортируем все для корректной регистрации relationship.
"""
from app.models.department import Department, DepartmentPosition  # noqa: F401
from app.models.position import Position  # noqa: F401
from app.models.specialization import Specialization  # noqa: F401
from app.models.employee import Employee  # noqa: F401
from app.models.equipment import Equipment, EquipmentCategory  # noqa: F401
from app.models.utility_payment import UtilityPayment  # noqa: F401
from app.models.fuel import FuelExpense, FuelIncome  # noqa: F401
from app.models.schedule import ScheduleEntry  # noqa: F401
