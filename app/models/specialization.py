"""
Модель специализации.
"""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Specialization(Base):
    """Специализация сотрудника."""
    __tablename__ = "specializations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # intern: служебная специализация, назначается вместо удалённых
    system_key: Mapped[str] = mapped_column(String(32), unique=True, nullable=True)

    @property
    def is_sentinel(self) -> bool:
        return self.system_key is not None
