"""
Сервис для работы с сотрудниками.
"""
import logging
from datetime import date
from typing import Optional

from sqlalchemy import asc, desc, or_
from sqlalchemy.orm import Session

from app.models.department import Department
from app.models.employee import Employee
from app.models.position import Position
from app.models.specialization import Specialization
from app.schemas.employee import EmployeeCreate, EmployeeUpdate
from app.core.exceptions import NotFoundException, ValidationException
from app.core.utils import sanitize_text
from app.services.sentinel_service import SentinelService

logger = logging.getLogger(__name__)

_TEXT_FIELDS = {
    "first_name": 100,
    "last_name": 100,
    "call_sign": 100,
    "phone_number": 32,
    "role": 32,
}


class EmployeeService:
    """Сервис для управления сотрудниками."""

    def __init__(self, db: Session):
        self.db = db
        self.sentinels = SentinelService(db)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Получить сотрудника по ID."""
        return self.db.query(Employee).filter(Employee.id == employee_id).first()

    def get(self, employee_id: int) -> Employee:
        employee = self.get_by_id(employee_id)
        if not employee:
            raise NotFoundException("Сотрудник", employee_id)
        return employee

    def get_all(
        self,
        department_id: Optional[int] = None,
        position_id: Optional[int] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
        sort_by: str = "call_sign",
        sort_order: str = "asc",
    ) -> tuple[list[Employee], int]:
        """
        Список сотрудников с фильтрами и сортировкой.

        Фильтр по Резерву включает сотрудников без подразделения.
        Возвращает (страница, общее количество).
        """
        query = self.db.query(Employee)

        if department_id is not None:
            department = self.db.get(Department, department_id)
            if department is not None and department.is_sentinel:
                query = query.filter(
                    or_(Employee.department_id == department_id, Employee.department_id.is_(None))
                )
            else:
                query = query.filter(Employee.department_id == department_id)
        if position_id is not None:
            query = query.filter(Employee.position_id == position_id)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    Employee.call_sign.ilike(pattern),
                    Employee.first_name.ilike(pattern),
                    Employee.last_name.ilike(pattern),
                    Employee.phone_number.ilike(pattern),
                )
            )

        total = query.count()
        column = getattr(Employee, sort_by)
        ordering = desc(column) if sort_order == "desc" else asc(column)
        items = query.order_by(ordering, Employee.id).offset(skip).limit(limit).all()
        return items, total

    def _check_references(self, values: dict) -> None:
        """Проверить, что все указанные FK существуют."""
        checks = (
            ("department_id", Department, "Подразделение"),
            ("position_id", Position, "Должность"),
            ("specialization_id", Specialization, "Специализация"),
        )
        for field, model, label in checks:
            value = values.get(field)
            if value is not None and self.db.get(model, value) is None:
                raise ValidationException(f"{label} с id {value} не существует")

    def create(self, data: EmployeeCreate) -> Employee:
        """Создать нового сотрудника."""
        values = data.model_dump()
        self._check_references(values)
        if values["specialization_id"] is None:
            values["specialization_id"] = self.sentinels.intern_specialization().id
        if values["hire_date"] is None:
            values["hire_date"] = date.today()
        for field, max_length in _TEXT_FIELDS.items():
            values[field] = sanitize_text(values[field], max_length=max_length)

        logger.info("Creating employee: call_sign=%s", values["call_sign"])
        employee = Employee(**values)
        self.db.add(employee)
        self.db.flush()
        self.db.refresh(employee)
        return employee

    def update(self, employee: Employee, data: EmployeeUpdate) -> Employee:
        """Обновить данные сотрудника."""
        update_data = data.model_dump(exclude_unset=True)
        for field in ("call_sign", "role", "specialization_id", "hire_date"):
            if field in update_data and update_data[field] is None:
                raise ValidationException(f"Поле {field} не может быть пустым")
        self._check_references(update_data)

        for field, value in update_data.items():
            if field in _TEXT_FIELDS:
                value = sanitize_text(value, max_length=_TEXT_FIELDS[field])
                if field == "phone_number" and value is None:
                    value = ""
            setattr(employee, field, value)

        self.db.flush()
        self.db.refresh(employee)
        return employee

    def delete(self, employee_id: int) -> None:
        employee = self.get(employee_id)
        self.db.delete(employee)
        self.db.flush()
        logger.info("Deleted employee id=%s", employee_id)
