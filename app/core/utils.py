"""
Утилиты приложения.
"""
import re
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

TOTAL_QUANT = Decimal("0.001")


def now_utc() -> datetime:
    """Текущее время в UTC (naive, как хранится в БД)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """datetime в UTC без tzinfo; naive значение считается уже UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def to_utc_date(value: date | datetime) -> date:
    """Календарная дата в UTC; naive datetime считается уже UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def month_start(value: date | datetime) -> date:
    """Первый день месяца для даты."""
    return to_utc_date(value).replace(day=1)


def add_months(value: date, months: int) -> date:
    """Сдвиг первого дня месяца на N месяцев (может быть отрицательным)."""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def quantize_total(value: Decimal) -> Decimal:
    """Округление суммы до точности хранения (3 знака)."""
    return value.quantize(TOTAL_QUANT, rounding=ROUND_HALF_UP)


_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')


def strip_control_chars(text: str) -> str:
    return _CONTROL_CHARS.sub('', text)


def sanitize_text(text: str | None, max_length: int = 1000) -> str | None:
    """Очистить текст от управляющих символов и ограничить длину."""
    if text is None:
        return None
    text = strip_control_chars(text)
    return text[:max_length].strip()
