"""
Pydantic схемы для подразделений.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.common import ShortName


class DepartmentBase(BaseModel):
    """Базовая схема подразделения."""
    name: ShortName


class DepartmentCreate(DepartmentBase):
    """Схема создания подразделения."""
    pass


class DepartmentUpdate(BaseModel):
    """Схема обновления подразделения."""
    name: Optional[ShortName] = None


class DepartmentResponse(DepartmentBase):
    """Схема ответа с данными подразделения."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_sentinel: bool = False


class DepartmentPositionShort(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class DepartmentEmployeeShort(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    call_sign: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position_name: str


class DepartmentEquipmentShort(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    serial_number: Optional[str] = None
    status: str


class DepartmentDetailResponse(DepartmentResponse):
    """Подразделение с должностями, сотрудниками и оборудованием."""
    positions: list[DepartmentPositionShort] = []
    employees: list[DepartmentEmployeeShort] = []
    equipment: list[DepartmentEquipmentShort] = []


class DepartmentListResponse(BaseModel):
    """Схема списка подразделений."""
    items: list[DepartmentResponse]
    total: int
