"""
Pydantic схемы для коммунальных платежей.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.utility_payment import PaymentType
from app.schemas.common import JsonDecimal, PaginatedResponse

Reading = Annotated[Decimal, Field(ge=0, max_digits=18, decimal_places=3)]
Price = Annotated[Decimal, Field(ge=0, max_digits=18, decimal_places=2)]
Total = Annotated[Decimal, Field(ge=0, max_digits=18, decimal_places=3)]


class UtilityPaymentCreate(BaseModel):
    """
    Схема создания платежа.

    total_amount можно не передавать, он будет рассчитан по показаниям.
    payment_month приводится к первому числу месяца.
    """
    department_id: int
    responsible_employee_id: Optional[int] = None
    payment_type: PaymentType
    previous_value: Optional[Reading] = None
    current_value: Optional[Reading] = None
    previous_value_night: Optional[Reading] = None
    current_value_night: Optional[Reading] = None
    price_per_unit: Price
    price_per_unit_night: Optional[Price] = None
    total_amount: Optional[Total] = None
    bill_image_url: Optional[str] = None
    payment_month: date


class UtilityPaymentResponse(BaseModel):
    """Схема ответа с данными платежа."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    department_id: int
    department_name: Optional[str] = None
    responsible_employee_id: Optional[int] = None
    responsible_employee_name: Optional[str] = None
    payment_type: PaymentType
    previous_value: Optional[JsonDecimal] = None
    current_value: Optional[JsonDecimal] = None
    previous_value_night: Optional[JsonDecimal] = None
    current_value_night: Optional[JsonDecimal] = None
    price_per_unit: JsonDecimal
    price_per_unit_night: Optional[JsonDecimal] = None
    total_amount: JsonDecimal
    consumption: JsonDecimal
    bill_image_url: Optional[str] = None
    payment_month: date
    created_at: datetime


class UtilityPaymentListResponse(PaginatedResponse[UtilityPaymentResponse]):
    pass


class LatestUtilityReadingResponse(BaseModel):
    """Последние показания для подстановки в новый платёж."""
    found: bool
    previous_value: Optional[JsonDecimal] = None
    current_value: Optional[JsonDecimal] = None
    previous_value_night: Optional[JsonDecimal] = None
    current_value_night: Optional[JsonDecimal] = None
    price_per_unit: Optional[JsonDecimal] = None
    price_per_unit_night: Optional[JsonDecimal] = None
    payment_month: Optional[date] = None
    created_at: Optional[datetime] = None
