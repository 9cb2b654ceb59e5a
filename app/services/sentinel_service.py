"""
Сервис служебных записей: Reserve, Unemployed, Intern.
"""
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.core.sentinels import SentinelKey, CANONICAL_NAMES, LEGACY_NAMES
from app.models.department import Department, DepartmentPosition
from app.models.position import Position
from app.models.specialization import Specialization

logger = logging.getLogger(__name__)

# (модель, атрибут с названием) для каждого ключа
_SENTINEL_TABLES = {
    SentinelKey.reserve: (Department, "name"),
    SentinelKey.unemployed: (Position, "title"),
    SentinelKey.intern: (Specialization, "name"),
}


class SentinelService:
    """Поиск и создание служебных записей."""

    def __init__(self, db: Session):
        self.db = db

    def _find_by_key(self, key: SentinelKey):
        model, _ = _SENTINEL_TABLES[key]
        return self.db.query(model).filter(model.system_key == key.value).first()

    def _adopt_legacy(self, key: SentinelKey):
        """Подобрать запись из старых данных по историческому названию."""
        model, name_attr = _SENTINEL_TABLES[key]
        column = getattr(model, name_attr)
        for legacy_name in LEGACY_NAMES[key]:
            row = (
                self.db.query(model)
                .filter(column == legacy_name, model.system_key.is_(None))
                .order_by(model.id)
                .first()
            )
            if row:
                logger.info(
                    "Adopting legacy %s '%s' (id=%s) as sentinel '%s'",
                    model.__tablename__, legacy_name, row.id, key.value,
                )
                row.system_key = key.value
                setattr(row, name_attr, CANONICAL_NAMES[key])
                self.db.flush()
                return row
        return None

    def _get_or_create(self, key: SentinelKey):
        row = self._find_by_key(key)
        if row:
            return row
        row = self._adopt_legacy(key)
        if row:
            return row
        model, name_attr = _SENTINEL_TABLES[key]
        row = model(**{name_attr: CANONICAL_NAMES[key], "system_key": key.value})
        self.db.add(row)
        self.db.flush()
        logger.info("Created sentinel %s '%s' (id=%s)", model.__tablename__, CANONICAL_NAMES[key], row.id)
        return row

    def reserve_department(self) -> Department:
        return self._get_or_create(SentinelKey.reserve)

    def unemployed_position(self) -> Position:
        return self._get_or_create(SentinelKey.unemployed)

    def intern_specialization(self) -> Specialization:
        return self._get_or_create(SentinelKey.intern)

    def _ensure_all(self) -> tuple[Department, Position, Specialization]:
        reserve = self.reserve_department()
        unemployed = self.unemployed_position()
        intern = self.intern_specialization()

        link = self.db.get(DepartmentPosition, (reserve.id, unemployed.id))
        if not link:
            self.db.add(DepartmentPosition(department_id=reserve.id, position_id=unemployed.id))
            self.db.flush()
        return reserve, unemployed, intern

    def ensure_sentinels(self) -> tuple[Department, Position, Specialization]:
        """
        Идемпотентно создать служебные записи и связь Unemployed ↔ Reserve.

        Если параллельный процесс успел создать запись раньше, транзакция
        откатывается и записи перечитываются.
        """
        try:
            result = self._ensure_all()
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Sentinel rows created concurrently, re-reading")
            result = self._ensure_all()
            self.db.commit()
        return result
