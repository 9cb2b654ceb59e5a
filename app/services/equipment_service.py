"""
Сервис для работы с оборудованием и категориями оборудования.
"""
import logging
from typing import Optional

from sqlalchemy import asc, desc, or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.models.department import Department
from app.models.employee import Employee
from app.models.equipment import Equipment, EquipmentCategory
from app.schemas.equipment import (
    EquipmentCategoryCreate,
    EquipmentCategoryUpdate,
    EquipmentCreate,
    EquipmentUpdate,
)
from app.core.exceptions import (
    NotFoundException,
    ValidationException,
    ConstraintViolationError,
    DuplicateError,
)
from app.core.utils import sanitize_text

logger = logging.getLogger(__name__)


class EquipmentCategoryService:
    """Сервис категорий оборудования."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, category_id: int) -> EquipmentCategory:
        category = self.db.query(EquipmentCategory).filter(EquipmentCategory.id == category_id).first()
        if not category:
            raise NotFoundException("Категория оборудования", category_id)
        return category

    def get_all(self) -> list[EquipmentCategory]:
        return self.db.query(EquipmentCategory).order_by(EquipmentCategory.name).all()

    def _flush_or_duplicate(self, name: str) -> None:
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Duplicate equipment category: %s", name)
            raise DuplicateError(f"Категория '{name}' уже существует")

    def create(self, data: EquipmentCategoryCreate) -> EquipmentCategory:
        name = sanitize_text(data.name, max_length=100)
        logger.info("Creating equipment category: name=%s", name)
        category = EquipmentCategory(name=name, description=sanitize_text(data.description) or "")
        self.db.add(category)
        self._flush_or_duplicate(name)
        self.db.refresh(category)
        return category

    def update(self, category: EquipmentCategory, data: EquipmentCategoryUpdate) -> EquipmentCategory:
        update_data = data.model_dump(exclude_unset=True)
        if update_data.get("name") is not None:
            category.name = sanitize_text(update_data["name"], max_length=100)
        if "description" in update_data:
            category.description = sanitize_text(update_data["description"]) or ""
        self._flush_or_duplicate(category.name)
        self.db.refresh(category)
        return category

    def delete(self, category_id: int) -> None:
        """Удалить категорию. Категорию с оборудованием удалить нельзя."""
        category = self.get(category_id)
        self.db.delete(category)
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Equipment category id=%s is in use, delete rolled back", category_id)
            raise ConstraintViolationError(
                f"Категория с id {category_id} используется оборудованием и не может быть удалена"
            )
        logger.info("Deleted equipment category id=%s", category_id)


class EquipmentService:
    """Сервис для управления оборудованием."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, equipment_id: int) -> Optional[Equipment]:
        return self.db.query(Equipment).filter(Equipment.id == equipment_id).first()

    def get(self, equipment_id: int) -> Equipment:
        equipment = self.get_by_id(equipment_id)
        if not equipment:
            raise NotFoundException("Оборудование", equipment_id)
        return equipment

    def get_all(
        self,
        department_id: Optional[int] = None,
        category_id: Optional[int] = None,
        search: Optional[str] = None,
        status: Optional[str] = None,
        measurement: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
        sort_by: str = "name",
        sort_order: str = "asc",
    ) -> tuple[list[Equipment], int]:
        """Список оборудования с фильтрами; возвращает (страница, общее количество)."""
        query = self.db.query(Equipment)
        if department_id is not None:
            query = query.filter(Equipment.department_id == department_id)
        if category_id is not None:
            query = query.filter(Equipment.category_id == category_id)
        if status:
            query = query.filter(Equipment.status == status)
        if measurement:
            query = query.filter(Equipment.measurement == measurement)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    Equipment.name.ilike(pattern),
                    Equipment.serial_number.ilike(pattern),
                    Equipment.description.ilike(pattern),
                )
            )

        total = query.count()
        column = getattr(Equipment, sort_by)
        ordering = desc(column) if sort_order == "desc" else asc(column)
        items = query.order_by(ordering, Equipment.id).offset(skip).limit(limit).all()
        return items, total

    def _check_references(self, values: dict) -> None:
        checks = (
            ("department_id", Department, "Подразделение"),
            ("category_id", EquipmentCategory, "Категория оборудования"),
            ("responsible_employee_id", Employee, "Сотрудник"),
        )
        for field, model, label in checks:
            value = values.get(field)
            if value is not None and self.db.get(model, value) is None:
                raise ValidationException(f"{label} с id {value} не существует")

    def _flush_or_duplicate(self, serial_number: Optional[str]) -> None:
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Duplicate serial number: %s", serial_number)
            raise DuplicateError(f"Оборудование с серийным номером {serial_number} уже существует")

    def create(self, data: EquipmentCreate) -> Equipment:
        """Создать единицу оборудования."""
        values = data.model_dump()
        self._check_references(values)
        values["name"] = sanitize_text(values["name"], max_length=200)
        values["description"] = sanitize_text(values["description"]) or ""
        values["status"] = data.status.value
        values["measurement"] = data.measurement.value

        logger.info("Creating equipment: name=%s, serial_number=%s", values["name"], values["serial_number"])
        equipment = Equipment(**values)
        self.db.add(equipment)
        self._flush_or_duplicate(values["serial_number"])
        self.db.refresh(equipment)
        return equipment

    def update(self, equipment: Equipment, data: EquipmentUpdate) -> Equipment:
        """Обновить оборудование. Явный department_id=null переносит его на склад."""
        update_data = data.model_dump(exclude_unset=True)
        for field in ("name", "purchase_date", "category_id", "amount", "status", "measurement"):
            if field in update_data and update_data[field] is None:
                raise ValidationException(f"Поле {field} не может быть пустым")
        self._check_references(update_data)

        for field, value in update_data.items():
            if field in ("status", "measurement"):
                value = value.value
            elif field == "name":
                value = sanitize_text(value, max_length=200)
            elif field == "description":
                value = sanitize_text(value) or ""
            setattr(equipment, field, value)

        self._flush_or_duplicate(equipment.serial_number)
        self.db.refresh(equipment)
        return equipment

    def delete(self, equipment_id: int) -> None:
        equipment = self.get(equipment_id)
        self.db.delete(equipment)
        self.db.flush()
        logger.info("Deleted equipment id=%s", equipment_id)
