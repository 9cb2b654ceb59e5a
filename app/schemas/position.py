"""
Pydantic схемы для должностей.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.common import LongName


class PositionBase(BaseModel):
    """Базовая схема должности."""
    title: LongName


class PositionCreate(PositionBase):
    """Схема создания должности с привязкой к подразделениям."""
    department_ids: list[int] = []


class PositionUpdate(BaseModel):
    """Схема обновления должности; department_ids заменяет набор связей целиком."""
    title: Optional[LongName] = None
    department_ids: Optional[list[int]] = None


class PositionResponse(PositionBase):
    """Схема ответа с данными должности."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_sentinel: bool = False
    department_ids: list[int] = []


class PositionListResponse(BaseModel):
    """Схема списка должностей."""
    items: list[PositionResponse]
    total: int
