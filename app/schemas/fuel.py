"""
Pydantic схемы для учёта топлива.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.fuel import FuelType
from app.schemas.common import JsonDecimal, PaginatedResponse

Mileage = Annotated[Decimal, Field(ge=0, max_digits=18, decimal_places=3)]
Price = Annotated[Decimal, Field(ge=0, max_digits=18, decimal_places=2)]
Liters = Annotated[Decimal, Field(gt=0, max_digits=18, decimal_places=3)]
Total = Annotated[Decimal, Field(ge=0, max_digits=18, decimal_places=3)]


class FuelExpenseCreate(BaseModel):
    """Запись пробега. total_amount рассчитывается, если не передан."""
    department_id: int
    responsible_employee_id: Optional[int] = None
    equipment_id: Optional[int] = None
    fuel_type: FuelType
    entry_date: datetime
    previous_mileage: Mileage
    current_mileage: Mileage
    price_per_liter: Price
    total_amount: Optional[Total] = None
    odometer_image_url: Optional[str] = None


class FuelExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    department_id: int
    department_name: Optional[str] = None
    responsible_employee_id: Optional[int] = None
    responsible_employee_name: Optional[str] = None
    equipment_id: Optional[int] = None
    equipment_name: Optional[str] = None
    fuel_type: FuelType
    entry_date: datetime
    previous_mileage: JsonDecimal
    current_mileage: JsonDecimal
    price_per_liter: JsonDecimal
    total_amount: JsonDecimal
    consumption: JsonDecimal
    odometer_image_url: Optional[str] = None
    created_at: datetime


class FuelExpenseListResponse(PaginatedResponse[FuelExpenseResponse]):
    pass


class FuelIncomeCreate(BaseModel):
    """Поступление топлива."""
    department_id: int
    receiver_employee_id: Optional[int] = None
    fuel_type: FuelType
    amount: Liters
    transaction_date: datetime


class FuelIncomeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    department_id: int
    department_name: Optional[str] = None
    receiver_employee_id: Optional[int] = None
    receiver_employee_name: Optional[str] = None
    fuel_type: FuelType
    amount: JsonDecimal
    transaction_date: datetime
    created_at: datetime


class FuelIncomeListResponse(PaginatedResponse[FuelIncomeResponse]):
    pass


class LatestFuelReadingResponse(BaseModel):
    """Последний пробег для подстановки в новую запись."""
    found: bool
    previous_mileage: Optional[JsonDecimal] = None
    current_mileage: Optional[JsonDecimal] = None
    price_per_liter: Optional[JsonDecimal] = None
    entry_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class FuelBalanceItem(BaseModel):
    fuel_type: FuelType
    balance: JsonDecimal


class FuelBalanceResponse(BaseModel):
    """Остаток топлива: поступления минус пробег."""
    department_id: int
    balances: list[FuelBalanceItem]
