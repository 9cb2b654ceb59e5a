"""
Сервис для работы с подразделениями.
"""
import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.models.department import Department, DepartmentPosition
from app.models.employee import Employee
from app.models.equipment import Equipment
from app.models.position import Position
from app.schemas.department import DepartmentCreate, DepartmentUpdate
from app.core.exceptions import (
    NotFoundException,
    ProtectedEntityError,
    ConstraintViolationError,
    DuplicateError,
)
from app.core.utils import sanitize_text
from app.services.sentinel_service import SentinelService

logger = logging.getLogger(__name__)


class DepartmentService:
    """Сервис для управления подразделениями."""

    def __init__(self, db: Session):
        self.db = db
        self.sentinels = SentinelService(db)

    def get_by_id(self, department_id: int) -> Optional[Department]:
        """Получить подразделение по ID."""
        return self.db.query(Department).filter(Department.id == department_id).first()

    def get(self, department_id: int) -> Department:
        """Получить подразделение или выбросить NotFoundException."""
        department = self.get_by_id(department_id)
        if not department:
            raise NotFoundException("Подразделение", department_id)
        return department

    def get_all(self) -> list[Department]:
        """Все подразделения по алфавиту."""
        return self.db.query(Department).order_by(Department.name).all()

    def get_positions(self, department: Department) -> list[Position]:
        return (
            self.db.query(Position)
            .join(DepartmentPosition, DepartmentPosition.position_id == Position.id)
            .filter(DepartmentPosition.department_id == department.id)
            .order_by(Position.title)
            .all()
        )

    def get_employees(self, department: Department) -> list[Employee]:
        """Сотрудники подразделения; для Резерва также сотрудники без подразделения."""
        query = self.db.query(Employee)
        if department.is_sentinel:
            query = query.filter(
                or_(Employee.department_id == department.id, Employee.department_id.is_(None))
            )
        else:
            query = query.filter(Employee.department_id == department.id)
        return query.order_by(Employee.call_sign).all()

    def get_equipment(self, department: Department) -> list[Equipment]:
        return (
            self.db.query(Equipment)
            .filter(Equipment.department_id == department.id)
            .order_by(Equipment.name)
            .all()
        )

    def _flush_or_duplicate(self, name: str) -> None:
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Duplicate department name: %s", name)
            raise DuplicateError(f"Подразделение с названием '{name}' уже существует")

    def create(self, data: DepartmentCreate) -> Department:
        """Создать подразделение."""
        name = sanitize_text(data.name, max_length=100)
        logger.info("Creating department: name=%s", name)
        department = Department(name=name)
        self.db.add(department)
        self._flush_or_duplicate(name)
        self.db.refresh(department)
        return department

    def update(self, department: Department, data: DepartmentUpdate) -> Department:
        """Переименовать подразделение. Служебное подразделение не переименовывается."""
        update_data = data.model_dump(exclude_unset=True)
        name = update_data.get("name")
        if name is None:
            return department
        name = sanitize_text(name, max_length=100)
        if department.is_sentinel and name != department.name:
            logger.warning("Rejected rename of sentinel department id=%s", department.id)
            raise ProtectedEntityError(f"Подразделение '{department.name}' нельзя переименовать")
        department.name = name
        self._flush_or_duplicate(name)
        self.db.refresh(department)
        return department

    def delete(self, department_id: int) -> None:
        """
        Удалить подразделение.

        Сотрудники переводятся в Резерв с должностью Unemployed,
        оборудование уходит на склад (department_id = NULL).
        Если на подразделение ссылаются платежи, транзакция
        откатывается целиком.
        """
        department = self.get(department_id)
        if department.is_sentinel:
            logger.warning("Rejected delete of sentinel department id=%s", department_id)
            raise ProtectedEntityError(f"Подразделение '{department.name}' нельзя удалить")

        reserve = self.sentinels.reserve_department()
        unemployed = self.sentinels.unemployed_position()

        try:
            moved_employees = (
                self.db.query(Employee)
                .filter(Employee.department_id == department.id)
                .update(
                    {Employee.department_id: reserve.id, Employee.position_id: unemployed.id},
                    synchronize_session="fetch",
                )
            )
            moved_equipment = (
                self.db.query(Equipment)
                .filter(Equipment.department_id == department.id)
                .update({Equipment.department_id: None}, synchronize_session="fetch")
            )
            self.db.query(DepartmentPosition).filter(
                DepartmentPosition.department_id == department.id
            ).delete(synchronize_session="fetch")
            self.db.delete(department)
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Department id=%s is still referenced, delete rolled back", department_id)
            raise ConstraintViolationError(
                f"Подразделение с id {department_id} используется в платежах и не может быть удалено"
            )

        logger.info(
            "Deleted department id=%s: %s employees moved to reserve, %s equipment moved to warehouse",
            department_id, moved_employees, moved_equipment,
        )
