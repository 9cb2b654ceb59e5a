"""
Агрегация платёжных записей по календарным периодам.

Функции модуля не обращаются к БД: на вход подаются любые объекты
с атрибутами ``ledger_date``, ``total_amount`` и ``consumption``
(модели UtilityPayment и FuelExpense).
"""
import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from app.core.utils import quantize_total, to_utc_date


class CalendarUnit(str, enum.Enum):
    DAY = "day"
    MONTH = "month"


@dataclass(frozen=True)
class LedgerBucket:
    key: str
    total_amount: Decimal
    consumption: Decimal


def calendar_key(value, unit: CalendarUnit) -> str:
    """Ключ периода: YYYY-MM-DD для дня, YYYY-MM для месяца (UTC)."""
    day = to_utc_date(value)
    if unit == CalendarUnit.MONTH:
        return f"{day.year:04d}-{day.month:02d}"
    return day.isoformat()


def bucket_by_calendar_unit(records: Iterable, unit: CalendarUnit) -> list[LedgerBucket]:
    """
    Суммирует total_amount и consumption по периодам.

    Пустые периоды не возвращаются, результат отсортирован по ключу
    и не зависит от порядка записей. Отрицательные разницы показаний
    не отбрасываются.
    """
    totals: dict[str, Decimal] = {}
    consumption: dict[str, Decimal] = {}
    for record in records:
        key = calendar_key(record.ledger_date, unit)
        totals[key] = totals.get(key, Decimal(0)) + record.total_amount
        consumption[key] = consumption.get(key, Decimal(0)) + record.consumption
    return [
        LedgerBucket(key=key, total_amount=totals[key], consumption=consumption[key])
        for key in sorted(totals)
    ]


def reading_delta(previous: Optional[Decimal], current: Optional[Decimal]) -> Decimal:
    """Разница показаний; отсутствующее показание считается нулём."""
    return (current or Decimal(0)) - (previous or Decimal(0))


def expected_utility_total(
    previous_value: Optional[Decimal],
    current_value: Optional[Decimal],
    price_per_unit: Decimal,
    previous_value_night: Optional[Decimal] = None,
    current_value_night: Optional[Decimal] = None,
    price_per_unit_night: Optional[Decimal] = None,
) -> Decimal:
    total = reading_delta(previous_value, current_value) * price_per_unit
    if price_per_unit_night is not None:
        total += reading_delta(previous_value_night, current_value_night) * price_per_unit_night
    return quantize_total(total)


def expected_fuel_total(
    previous_mileage: Decimal, current_mileage: Decimal, price_per_liter: Decimal
) -> Decimal:
    return quantize_total((current_mileage - previous_mileage) * price_per_liter)
