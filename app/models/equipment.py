"""
Модели оборудования и категорий оборудования.
"""
import enum
from datetime import date
from decimal import Decimal
from sqlalchemy import Integer, String, Text, Date, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.core.sentinels import WAREHOUSE_NAME


class EquipmentStatus(str, enum.Enum):
    used = "Used"
    not_used = "NotUsed"
    broken = "Broken"


class Measurement(str, enum.Enum):
    unit = "Unit"
    meter = "Meter"
    liter = "Liter"


class EquipmentCategory(Base):
    """Категория оборудования."""
    __tablename__ = "equipment_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")


class Equipment(Base):
    """Единица оборудования."""
    __tablename__ = "equipment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    serial_number: Mapped[str] = mapped_column(String(100), unique=True, nullable=True)
    purchase_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=EquipmentStatus.used.value)
    measurement: Mapped[str] = mapped_column(String(16), nullable=False, default=Measurement.unit.value)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=Decimal("1"))
    image_data: Mapped[str] = mapped_column(Text, nullable=True)
    # NULL: оборудование на складе
    department_id: Mapped[int] = mapped_column(ForeignKey("departments.id"), nullable=True, index=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("equipment_categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    responsible_employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="SET NULL"), nullable=True, index=True
    )

    department = relationship("Department", lazy="select")
    category = relationship("EquipmentCategory", lazy="select")
    responsible_employee = relationship("Employee", lazy="select")

    @property
    def department_name(self) -> str:
        return self.department.name if self.department else WAREHOUSE_NAME

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category else None

    @property
    def responsible_employee_name(self) -> str | None:
        return self.responsible_employee.call_sign if self.responsible_employee else None
