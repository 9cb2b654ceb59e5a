"""
Сервис для работы со специализациями.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.models.employee import Employee
from app.models.specialization import Specialization
from app.schemas.specialization import SpecializationCreate, SpecializationUpdate
from app.core.exceptions import NotFoundException, ProtectedEntityError, ConstraintViolationError
from app.core.utils import sanitize_text
from app.services.sentinel_service import SentinelService

logger = logging.getLogger(__name__)


class SpecializationService:

    def __init__(self, db: Session):
        self.db = db
        self.sentinels = SentinelService(db)

    def get_by_id(self, specialization_id: int) -> Optional[Specialization]:
        return (
            self.db.query(Specialization)
            .filter(Specialization.id == specialization_id)
            .first()
        )

    def get(self, specialization_id: int) -> Specialization:
        specialization = self.get_by_id(specialization_id)
        if not specialization:
            raise NotFoundException("Специализация", specialization_id)
        return specialization

    def get_all(self) -> list[Specialization]:
        return self.db.query(Specialization).order_by(Specialization.name).all()

    def create(self, data: SpecializationCreate) -> Specialization:
        name = sanitize_text(data.name, max_length=100)
        logger.info("Creating specialization: name=%s", name)
        specialization = Specialization(name=name)
        self.db.add(specialization)
        self.db.flush()
        self.db.refresh(specialization)
        return specialization

    def update(self, specialization: Specialization, data: SpecializationUpdate) -> Specialization:
        update_data = data.model_dump(exclude_unset=True)
        name = update_data.get("name")
        if name is None:
            return specialization
        name = sanitize_text(name, max_length=100)
        if specialization.is_sentinel and name != specialization.name:
            logger.warning("Rejected rename of sentinel specialization id=%s", specialization.id)
            raise ProtectedEntityError(f"Специализацию '{specialization.name}' нельзя переименовать")
        specialization.name = name
        self.db.flush()
        self.db.refresh(specialization)
        return specialization

    def delete(self, specialization_id: int) -> None:
        """Удалить специализацию; сотрудники получают специализацию Intern."""
        specialization = self.get(specialization_id)
        if specialization.is_sentinel:
            logger.warning("Rejected delete of sentinel specialization id=%s", specialization_id)
            raise ProtectedEntityError(f"Специализацию '{specialization.name}' нельзя удалить")

        intern = self.sentinels.intern_specialization()

        try:
            moved = (
                self.db.query(Employee)
                .filter(Employee.specialization_id == specialization.id)
                .update({Employee.specialization_id: intern.id}, synchronize_session="fetch")
            )
            self.db.delete(specialization)
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Specialization id=%s is still referenced, delete rolled back", specialization_id)
            raise ConstraintViolationError(
                f"Специализация с id {specialization_id} не может быть удалена"
            )

        logger.info("Deleted specialization id=%s: %s employees moved to intern", specialization_id, moved)
