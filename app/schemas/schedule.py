"""
Pydantic схемы для графика работы.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.schedule import ScheduleState
from app.schemas.common import JsonDecimal


class ScheduleEntryCreate(BaseModel):
    """Смена: hours рассчитывается по интервалу, ночная смена может переходить на следующий день."""
    employee_id: int
    department_id: int
    start_time: datetime
    end_time: datetime
    state: ScheduleState = ScheduleState.rest


class ScheduleEntryUpdate(BaseModel):
    employee_id: Optional[int] = None
    department_id: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    state: Optional[ScheduleState] = None


class ScheduleEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: int
    department_id: int
    start_time: datetime
    end_time: datetime
    hours: JsonDecimal
    state: ScheduleState
    employee_name: Optional[str] = None
    position_title: Optional[str] = None
    department_name: Optional[str] = None


class ScheduleEntryListResponse(BaseModel):
    items: list[ScheduleEntryResponse]
    total: int
