"""
Pydantic схемы для специализаций.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.common import ShortName


class SpecializationBase(BaseModel):
    name: ShortName


class SpecializationCreate(SpecializationBase):
    pass


class SpecializationUpdate(BaseModel):
    name: Optional[ShortName] = None


class SpecializationResponse(SpecializationBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_sentinel: bool = False


class SpecializationListResponse(BaseModel):
    items: list[SpecializationResponse]
    total: int
