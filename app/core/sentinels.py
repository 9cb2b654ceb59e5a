"""
Служебные записи: ключи, канонические имена и исторические названия.
"""
import enum


class SentinelKey(str, enum.Enum):
    reserve = "reserve"
    unemployed = "unemployed"
    intern = "intern"


RESERVE_DEPARTMENT_NAME = "Reserve"
UNEMPLOYED_POSITION_TITLE = "Unemployed"
INTERN_SPECIALIZATION_NAME = "Intern"

WAREHOUSE_NAME = "Warehouse"

CANONICAL_NAMES = {
    SentinelKey.reserve: RESERVE_DEPARTMENT_NAME,
    SentinelKey.unemployed: UNEMPLOYED_POSITION_TITLE,
    SentinelKey.intern: INTERN_SPECIALIZATION_NAME,
}

# Названия, под которыми служебные записи встречаются в старых данных.
# Каноническое имя идёт первым, оно приоритетнее при подборе.
LEGACY_NAMES = {
    SentinelKey.reserve: (RESERVE_DEPARTMENT_NAME, "Резерв", "Global Reserve", "Unassigned"),
    SentinelKey.unemployed: (UNEMPLOYED_POSITION_TITLE, "Без Посади"),
    SentinelKey.intern: (INTERN_SPECIALIZATION_NAME, "Без Спец."),
}
