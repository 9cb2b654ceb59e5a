"""
Модель сотрудника.
"""
from datetime import date, datetime
from sqlalchemy import Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.core.sentinels import RESERVE_DEPARTMENT_NAME, UNEMPLOYED_POSITION_TITLE
from app.core.utils import now_utc


class Employee(Base):
    """Сотрудник."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str] = mapped_column(String(100), nullable=True)
    call_sign: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    birth_date: Mapped[date] = mapped_column(Date, nullable=True)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="Worker")
    # NULL: без должности / без подразделения (отображается как служебная запись)
    position_id: Mapped[int] = mapped_column(ForeignKey("positions.id"), nullable=True, index=True)
    department_id: Mapped[int] = mapped_column(ForeignKey("departments.id"), nullable=True, index=True)
    specialization_id: Mapped[int] = mapped_column(
        ForeignKey("specializations.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now_utc)

    position = relationship("Position", lazy="select")
    department = relationship("Department", lazy="select")
    specialization = relationship("Specialization", lazy="select")

    @property
    def department_name(self) -> str:
        return self.department.name if self.department else RESERVE_DEPARTMENT_NAME

    @property
    def position_name(self) -> str:
        return self.position.title if self.position else UNEMPLOYED_POSITION_TITLE

    @property
    def specialization_name(self) -> str | None:
        return self.specialization.name if self.specialization else None
