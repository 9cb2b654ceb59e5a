"""
Модели учёта топлива: расходы (по пробегу) и поступления.
"""
import enum
from datetime import datetime
from decimal import Decimal
from sqlalchemy import Integer, String, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.core.utils import now_utc


class FuelType(str, enum.Enum):
    gasoline = "Gasoline"
    diesel = "Diesel"
    gas = "Gas"


class FuelExpense(Base):
    """Расход топлива: запись пробега техники."""
    __tablename__ = "fuel_expenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    department_id: Mapped[int] = mapped_column(
        ForeignKey("departments.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    responsible_employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="SET NULL"), nullable=True, index=True
    )
    equipment_id: Mapped[int] = mapped_column(
        ForeignKey("equipment.id", ondelete="SET NULL"), nullable=True, index=True
    )
    fuel_type: Mapped[str] = mapped_column(String(16), nullable=False)
    entry_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    previous_mileage: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=False)
    current_mileage: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=False)
    price_per_liter: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=False)
    odometer_image_url: Mapped[str] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now_utc)

    department = relationship("Department", lazy="select")
    responsible_employee = relationship("Employee", lazy="select")
    equipment = relationship("Equipment", lazy="select")

    @property
    def ledger_date(self) -> datetime:
        return self.entry_date

    @property
    def consumption(self) -> Decimal:
        """Пройденное расстояние, км."""
        return self.current_mileage - self.previous_mileage

    @property
    def department_name(self) -> str | None:
        return self.department.name if self.department else None

    @property
    def responsible_employee_name(self) -> str | None:
        return self.responsible_employee.call_sign if self.responsible_employee else None

    @property
    def equipment_name(self) -> str | None:
        return self.equipment.name if self.equipment else None


class FuelIncome(Base):
    """Поступление топлива на склад подразделения (литры)."""
    __tablename__ = "fuel_incomes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    department_id: Mapped[int] = mapped_column(
        ForeignKey("departments.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    receiver_employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="SET NULL"), nullable=True, index=True
    )
    fuel_type: Mapped[str] = mapped_column(String(16), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=False)
    transaction_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now_utc)

    department = relationship("Department", lazy="select")
    receiver_employee = relationship("Employee", lazy="select")

    @property
    def department_name(self) -> str | None:
        return self.department.name if self.department else None

    @property
    def receiver_employee_name(self) -> str | None:
        return self.receiver_employee.call_sign if self.receiver_employee else None
