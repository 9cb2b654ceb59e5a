"""
Модель должности.
"""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class Position(Base):
    """Должность."""
    __tablename__ = "positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    # unemployed: служебная должность «Без должности»
    system_key: Mapped[str] = mapped_column(String(32), unique=True, nullable=True)

    department_links = relationship("DepartmentPosition", lazy="select", viewonly=True)

    @property
    def is_sentinel(self) -> bool:
        return self.system_key is not None

    @property
    def department_ids(self) -> list[int]:
        return sorted(link.department_id for link in self.department_links)
