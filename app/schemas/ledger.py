"""
Pydantic схемы для статистики по платежам.
"""
from pydantic import BaseModel

from app.schemas.common import JsonDecimal


class SeriesPoint(BaseModel):
    period: str
    value: JsonDecimal


class LedgerStatisticsResponse(BaseModel):
    """Ряды расходов и потребления по календарным периодам."""
    expenses: list[SeriesPoint]
    consumption: list[SeriesPoint]

    @classmethod
    def from_buckets(cls, buckets) -> "LedgerStatisticsResponse":
        return cls(
            expenses=[SeriesPoint(period=b.key, value=b.total_amount) for b in buckets],
            consumption=[SeriesPoint(period=b.key, value=b.consumption) for b in buckets],
        )
