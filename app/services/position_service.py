"""
Сервис для работы с должностями.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.models.department import Department, DepartmentPosition
from app.models.employee import Employee
from app.models.position import Position
from app.schemas.position import PositionCreate, PositionUpdate
from app.core.exceptions import (
    NotFoundException,
    ValidationException,
    ProtectedEntityError,
    ConstraintViolationError,
)
from app.core.utils import sanitize_text
from app.services.sentinel_service import SentinelService

logger = logging.getLogger(__name__)


class PositionService:
    """Сервис для управления должностями."""

    def __init__(self, db: Session):
        self.db = db
        self.sentinels = SentinelService(db)

    def get_by_id(self, position_id: int) -> Optional[Position]:
        return self.db.query(Position).filter(Position.id == position_id).first()

    def get(self, position_id: int) -> Position:
        position = self.get_by_id(position_id)
        if not position:
            raise NotFoundException("Должность", position_id)
        return position

    def get_all(self, department_id: Optional[int] = None) -> list[Position]:
        """Список должностей, опционально только доступных в подразделении."""
        query = self.db.query(Position)
        if department_id is not None:
            query = query.join(
                DepartmentPosition, DepartmentPosition.position_id == Position.id
            ).filter(DepartmentPosition.department_id == department_id)
        return query.order_by(Position.title).all()

    def _check_departments(self, department_ids: list[int]) -> set[int]:
        wanted = set(department_ids)
        if not wanted:
            return wanted
        found = {
            row.id for row in self.db.query(Department.id).filter(Department.id.in_(wanted)).all()
        }
        missing = sorted(wanted - found)
        if missing:
            raise ValidationException(f"Подразделения не найдены: {missing}")
        return wanted

    def _set_departments(self, position: Position, department_ids: set[int]) -> None:
        """Привести связи должности к заданному набору подразделений."""
        current = {
            row.department_id
            for row in self.db.query(DepartmentPosition.department_id)
            .filter(DepartmentPosition.position_id == position.id)
            .all()
        }
        to_remove = current - department_ids
        if to_remove:
            self.db.query(DepartmentPosition).filter(
                DepartmentPosition.position_id == position.id,
                DepartmentPosition.department_id.in_(to_remove),
            ).delete(synchronize_session="fetch")
        for department_id in sorted(department_ids - current):
            self.db.add(DepartmentPosition(department_id=department_id, position_id=position.id))

    def create(self, data: PositionCreate) -> Position:
        """Создать должность и привязать её к подразделениям."""
        department_ids = self._check_departments(data.department_ids)
        title = sanitize_text(data.title, max_length=200)
        logger.info("Creating position: title=%s, departments=%s", title, sorted(department_ids))
        position = Position(title=title)
        self.db.add(position)
        self.db.flush()
        self._set_departments(position, department_ids)
        self.db.flush()
        self.db.refresh(position)
        return position

    def update(self, position: Position, data: PositionUpdate) -> Position:
        """Обновить название и/или набор подразделений."""
        update_data = data.model_dump(exclude_unset=True)

        title = update_data.get("title")
        if title is not None:
            title = sanitize_text(title, max_length=200)
            if position.is_sentinel and title != position.title:
                logger.warning("Rejected rename of sentinel position id=%s", position.id)
                raise ProtectedEntityError(f"Должность '{position.title}' нельзя переименовать")
            position.title = title

        if update_data.get("department_ids") is not None:
            department_ids = self._check_departments(update_data["department_ids"])
            if position.is_sentinel:
                # Unemployed всегда доступна в Резерве
                department_ids.add(self.sentinels.reserve_department().id)
            self._set_departments(position, department_ids)

        self.db.flush()
        self.db.refresh(position)
        return position

    def delete(self, position_id: int) -> None:
        """Удалить должность; сотрудники переводятся на Unemployed."""
        position = self.get(position_id)
        if position.is_sentinel:
            logger.warning("Rejected delete of sentinel position id=%s", position_id)
            raise ProtectedEntityError(f"Должность '{position.title}' нельзя удалить")

        unemployed = self.sentinels.unemployed_position()

        try:
            moved = (
                self.db.query(Employee)
                .filter(Employee.position_id == position.id)
                .update({Employee.position_id: unemployed.id}, synchronize_session="fetch")
            )
            self.db.query(DepartmentPosition).filter(
                DepartmentPosition.position_id == position.id
            ).delete(synchronize_session="fetch")
            self.db.delete(position)
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Position id=%s is still referenced, delete rolled back", position_id)
            raise ConstraintViolationError(f"Должность с id {position_id} не может быть удалена")

        logger.info("Deleted position id=%s: %s employees moved to unemployed", position_id, moved)
