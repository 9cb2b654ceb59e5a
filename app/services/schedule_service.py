"""
Сервис графика работы: смены сотрудников по подразделениям.
"""
import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from sqlalchemy.orm import Session

from app.models.department import Department
from app.models.employee import Employee
from app.models.schedule import ScheduleEntry, ScheduleState
from app.schemas.schedule import ScheduleEntryCreate, ScheduleEntryUpdate
from app.core.exceptions import NotFoundException, ValidationException
from app.core.utils import now_utc, to_naive_utc

logger = logging.getLogger(__name__)

HOURS_QUANT = Decimal("0.01")


def shift_hours(start_time: datetime, end_time: datetime) -> Decimal:
    """Длительность смены в часах (2 знака)."""
    seconds = Decimal(int((end_time - start_time).total_seconds()))
    return (seconds / Decimal(3600)).quantize(HOURS_QUANT, rounding=ROUND_HALF_UP)


class ScheduleService:
    """Сервис для управления графиком работы."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, entry_id: int) -> Optional[ScheduleEntry]:
        return self.db.query(ScheduleEntry).filter(ScheduleEntry.id == entry_id).first()

    def get(self, entry_id: int) -> ScheduleEntry:
        entry = self.get_by_id(entry_id)
        if not entry:
            raise NotFoundException("Запись графика", entry_id)
        return entry

    def get_all(
        self,
        department_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        position_id: Optional[int] = None,
        state: Optional[ScheduleState] = None,
    ) -> list[ScheduleEntry]:
        """
        Записи графика с фильтрами.

        Если заданы обе границы, возвращаются смены, пересекающиеся с периодом
        (ночная смена видна в обоих днях). Только start: смены, начавшиеся не раньше.
        Только end: смены, закончившиеся не позже.
        """
        query = self.db.query(ScheduleEntry)
        if department_id is not None:
            query = query.filter(ScheduleEntry.department_id == department_id)

        if start is not None:
            start = to_naive_utc(start)
        if end is not None:
            end = to_naive_utc(end)
        if start is not None and end is not None:
            query = query.filter(ScheduleEntry.start_time < end, ScheduleEntry.end_time > start)
        elif start is not None:
            query = query.filter(ScheduleEntry.start_time >= start)
        elif end is not None:
            query = query.filter(ScheduleEntry.end_time <= end)

        if position_id is not None:
            query = query.join(Employee, Employee.id == ScheduleEntry.employee_id).filter(
                Employee.position_id == position_id
            )
        if state is not None:
            query = query.filter(ScheduleEntry.state == state.value)
        return query.order_by(ScheduleEntry.start_time, ScheduleEntry.id).all()

    def get_current(self, at: Optional[datetime] = None) -> list[ScheduleEntry]:
        """Смены, идущие в данный момент."""
        moment = to_naive_utc(at) if at is not None else now_utc()
        return (
            self.db.query(ScheduleEntry)
            .filter(ScheduleEntry.start_time <= moment, ScheduleEntry.end_time >= moment)
            .order_by(ScheduleEntry.start_time, ScheduleEntry.id)
            .all()
        )

    def _check_references(self, employee_id: int, department_id: int) -> None:
        employee = self.db.get(Employee, employee_id)
        if employee is None:
            raise ValidationException(f"Сотрудник с id {employee_id} не существует")
        if self.db.get(Department, department_id) is None:
            raise ValidationException(f"Подразделение с id {department_id} не существует")
        if employee.department_id is not None and employee.department_id != department_id:
            # Временное прикомандирование допускается
            logger.info(
                "Employee id=%s scheduled outside own department: %s != %s",
                employee_id, department_id, employee.department_id,
            )

    @staticmethod
    def _check_interval(start_time: datetime, end_time: datetime) -> None:
        if end_time <= start_time:
            raise ValidationException("end_time должен быть позже start_time")

    def create(self, data: ScheduleEntryCreate) -> ScheduleEntry:
        """Создать запись графика."""
        start_time = to_naive_utc(data.start_time)
        end_time = to_naive_utc(data.end_time)
        self._check_interval(start_time, end_time)
        self._check_references(data.employee_id, data.department_id)

        logger.info(
            "Creating schedule entry: employee_id=%s, department_id=%s, %s..%s",
            data.employee_id, data.department_id, start_time, end_time,
        )
        entry = ScheduleEntry(
            employee_id=data.employee_id,
            department_id=data.department_id,
            start_time=start_time,
            end_time=end_time,
            hours=shift_hours(start_time, end_time),
            state=data.state.value,
        )
        self.db.add(entry)
        self.db.flush()
        self.db.refresh(entry)
        return entry

    def update(self, entry: ScheduleEntry, data: ScheduleEntryUpdate) -> ScheduleEntry:
        """Обновить запись; часы пересчитываются по новому интервалу."""
        update_data = data.model_dump(exclude_unset=True)
        for field in update_data:
            if update_data[field] is None:
                raise ValidationException(f"Поле {field} не может быть пустым")

        start_time = to_naive_utc(update_data.get("start_time", entry.start_time))
        end_time = to_naive_utc(update_data.get("end_time", entry.end_time))
        employee_id = update_data.get("employee_id", entry.employee_id)
        department_id = update_data.get("department_id", entry.department_id)
        self._check_interval(start_time, end_time)
        self._check_references(employee_id, department_id)

        entry.employee_id = employee_id
        entry.department_id = department_id
        entry.start_time = start_time
        entry.end_time = end_time
        entry.hours = shift_hours(start_time, end_time)
        if "state" in update_data:
            entry.state = update_data["state"].value
        self.db.flush()
        self.db.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> None:
        entry = self.get(entry_id)
        self.db.delete(entry)
        self.db.flush()
        logger.info("Deleted schedule entry id=%s", entry_id)
