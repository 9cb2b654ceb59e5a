"""
Общие типы и схемы для пагинации.
"""
from decimal import Decimal
from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, PlainSerializer, StringConstraints

from app.core.utils import strip_control_chars

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]


def _without_control_chars(value):
    if isinstance(value, str):
        return strip_control_chars(value)
    return value


# Управляющие символы убираются до проверки длины
CleanText = BeforeValidator(_without_control_chars)

# Непустые названия без пробелов по краям
ShortName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100), CleanText]
LongName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200), CleanText]

ShortText = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100), CleanText]

# Decimal отдаётся в JSON строкой с фиксированной точкой, без потери знаков
JsonDecimal = Annotated[Decimal, PlainSerializer(lambda v: format(v, "f"), return_type=str, when_used="json")]


class PaginatedResponse(BaseModel, Generic[T]):
    """Базовая схема для пагинированных ответов."""
    items: list[T]
    total: int
    skip: int = 0
    limit: int = 100
