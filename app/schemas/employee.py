"""
Pydantic схемы для сотрудников.
"""
from datetime import date, datetime
from typing import Annotated, Optional, Literal

from pydantic import BaseModel, ConfigDict, StringConstraints

from app.schemas.common import CleanText, PaginatedResponse, ShortName, ShortText


EmployeeSortField = Literal["call_sign", "last_name", "first_name", "hire_date", "created_at"]

Phone = Annotated[str, StringConstraints(strip_whitespace=True, max_length=32), CleanText]
Role = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=32), CleanText]


class EmployeeBase(BaseModel):
    """Базовая схема сотрудника."""
    first_name: Optional[ShortText] = None
    last_name: Optional[ShortText] = None
    call_sign: ShortName
    phone_number: Phone = ""
    birth_date: Optional[date] = None
    role: Role = "Worker"
    position_id: Optional[int] = None
    department_id: Optional[int] = None


class EmployeeCreate(EmployeeBase):
    """Схема создания сотрудника. Без специализации назначается Intern."""
    hire_date: Optional[date] = None
    specialization_id: Optional[int] = None


class EmployeeUpdate(BaseModel):
    """Схема обновления сотрудника."""
    first_name: Optional[ShortText] = None
    last_name: Optional[ShortText] = None
    call_sign: Optional[ShortName] = None
    phone_number: Optional[Phone] = None
    birth_date: Optional[date] = None
    hire_date: Optional[date] = None
    role: Optional[Role] = None
    position_id: Optional[int] = None
    department_id: Optional[int] = None
    specialization_id: Optional[int] = None


class EmployeeResponse(EmployeeBase):
    """Схема ответа с данными сотрудника."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    hire_date: date
    specialization_id: int
    department_name: str
    position_name: str
    specialization_name: Optional[str] = None
    created_at: datetime


class EmployeeListResponse(PaginatedResponse[EmployeeResponse]):
    """Схема списка сотрудников."""
