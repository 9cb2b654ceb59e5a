"""
Модель коммунального платежа.
"""
import enum
from datetime import date, datetime
from decimal import Decimal
from sqlalchemy import Integer, String, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.core.utils import now_utc


class PaymentType(str, enum.Enum):
    electricity = "Electricity"
    gas = "Gas"
    water = "Water"
    rent = "Rent"


class UtilityPayment(Base):
    """Платёж за коммунальную услугу (электричество поддерживает две зоны)."""
    __tablename__ = "utility_payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    department_id: Mapped[int] = mapped_column(
        ForeignKey("departments.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    responsible_employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="SET NULL"), nullable=True, index=True
    )
    payment_type: Mapped[str] = mapped_column(String(16), nullable=False)
    previous_value: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=True)
    current_value: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=True)
    previous_value_night: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=True)
    current_value_night: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=True)
    price_per_unit: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    price_per_unit_night: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=True)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(18, 3), nullable=False)
    bill_image_url: Mapped[str] = mapped_column(String, nullable=True)
    # Всегда первое число месяца
    payment_month: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now_utc)

    department = relationship("Department", lazy="select")
    responsible_employee = relationship("Employee", lazy="select")

    @property
    def ledger_date(self) -> date:
        return self.payment_month

    @property
    def consumption(self) -> Decimal:
        """Потребление: дневная зона + ночная зона (пустые показания = 0)."""
        day = (self.current_value or Decimal(0)) - (self.previous_value or Decimal(0))
        night = (self.current_value_night or Decimal(0)) - (self.previous_value_night or Decimal(0))
        return day + night

    @property
    def department_name(self) -> str | None:
        return self.department.name if self.department else None

    @property
    def responsible_employee_name(self) -> str | None:
        return self.responsible_employee.call_sign if self.responsible_employee else None
