"""
Модели подразделений и связи подразделение ↔ должность.
"""
from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class Department(Base):
    """Подразделение."""
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    # reserve: служебное подразделение «Резерв», не удаляется
    system_key: Mapped[str] = mapped_column(String(32), unique=True, nullable=True)

    position_links = relationship("DepartmentPosition", lazy="select", viewonly=True)

    @property
    def is_sentinel(self) -> bool:
        return self.system_key is not None


class DepartmentPosition(Base):
    """Должность, доступная в подразделении (many-to-many)."""
    __tablename__ = "department_positions"

    department_id: Mapped[int] = mapped_column(ForeignKey("departments.id"), primary_key=True)
    position_id: Mapped[int] = mapped_column(ForeignKey("positions.id"), primary_key=True, index=True)

    position = relationship("Position", lazy="select")
