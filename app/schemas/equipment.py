"""
Pydantic схемы для оборудования и категорий оборудования.
"""
from datetime import date
from decimal import Decimal
from typing import Annotated, Optional, Literal

from pydantic import BaseModel, ConfigDict, Field

from app.models.equipment import EquipmentStatus, Measurement
from app.schemas.common import JsonDecimal, LongName, PaginatedResponse, ShortName

PositiveAmount = Annotated[Decimal, Field(gt=0, max_digits=18, decimal_places=2)]

EquipmentSortField = Literal["name", "purchase_date", "status", "amount", "id"]


# ---- Категории ----

class EquipmentCategoryBase(BaseModel):
    name: ShortName
    description: str = ""


class EquipmentCategoryCreate(EquipmentCategoryBase):
    pass


class EquipmentCategoryUpdate(BaseModel):
    name: Optional[ShortName] = None
    description: Optional[str] = None


class EquipmentCategoryResponse(EquipmentCategoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class EquipmentCategoryListResponse(BaseModel):
    items: list[EquipmentCategoryResponse]
    total: int


# ---- Оборудование ----

class EquipmentBase(BaseModel):
    """Базовая схема оборудования."""
    name: LongName
    description: str = ""
    serial_number: Optional[ShortName] = None
    purchase_date: date
    status: EquipmentStatus = EquipmentStatus.used
    measurement: Measurement = Measurement.unit
    image_data: Optional[str] = None
    department_id: Optional[int] = None
    category_id: int
    responsible_employee_id: Optional[int] = None


class EquipmentCreate(EquipmentBase):
    """Схема создания оборудования."""
    amount: PositiveAmount = Decimal("1")


class EquipmentUpdate(BaseModel):
    """Схема обновления оборудования. department_id=null переносит на склад."""
    name: Optional[LongName] = None
    description: Optional[str] = None
    serial_number: Optional[ShortName] = None
    purchase_date: Optional[date] = None
    status: Optional[EquipmentStatus] = None
    measurement: Optional[Measurement] = None
    amount: Optional[PositiveAmount] = None
    image_data: Optional[str] = None
    department_id: Optional[int] = None
    category_id: Optional[int] = None
    responsible_employee_id: Optional[int] = None


class EquipmentResponse(EquipmentBase):
    """Схема ответа с данными оборудования."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: JsonDecimal
    department_name: str
    category_name: Optional[str] = None
    responsible_employee_name: Optional[str] = None


class EquipmentListResponse(PaginatedResponse[EquipmentResponse]):
    pass
