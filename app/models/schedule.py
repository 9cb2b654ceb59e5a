"""
Модель графика работы: смены сотрудников.
"""
import enum
from datetime import datetime
from decimal import Decimal
from sqlalchemy import Integer, String, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.core.utils import now_utc


class ScheduleState(str, enum.Enum):
    on_work = "OnWork"
    rest = "Rest"
    vacation = "Vacation"
    illness = "Illness"


class ScheduleEntry(Base):
    """Запись графика: интервал времени и состояние сотрудника."""
    __tablename__ = "schedule_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Записи графика удаляются вместе с сотрудником и подразделением
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True
    )
    department_id: Mapped[int] = mapped_column(
        ForeignKey("departments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    end_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    hours: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    state: Mapped[str] = mapped_column(String(16), nullable=False, default=ScheduleState.rest.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now_utc)

    employee = relationship("Employee", lazy="select")
    department = relationship("Department", lazy="select")

    @property
    def employee_name(self) -> str | None:
        if not self.employee:
            return None
        full_name = f"{self.employee.first_name or ''} {self.employee.last_name or ''}".strip()
        return full_name or self.employee.call_sign

    @property
    def position_title(self) -> str | None:
        if not self.employee or not self.employee.position:
            return None
        return self.employee.position.title

    @property
    def department_name(self) -> str | None:
        return self.department.name if self.department else None
