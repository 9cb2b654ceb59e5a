"""
API endpoints.
"""
from fastapi import APIRouter

from app.api import (
    departments,
    positions,
    specializations,
    employees,
    equipment_categories,
    equipment,
    utility_payments,
    fuel,
    schedule,
)

# Главный роутер API
api_router = APIRouter(prefix="/api/v1")

# Подключаем все модули
api_router.include_router(departments.router)
api_router.include_router(positions.router)
api_router.include_router(specializations.router)
api_router.include_router(employees.router)
api_router.include_router(equipment_categories.router)
api_router.include_router(equipment.router)
api_router.include_router(utility_payments.router)
api_router.include_router(fuel.router)
api_router.include_router(schedule.router)

__all__ = ["api_router"]
