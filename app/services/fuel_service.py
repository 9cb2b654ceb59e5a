"""
Сервис учёта топлива: пробег, поступления, остатки и статистика.
"""
import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.models.department import Department
from app.models.employee import Employee
from app.models.equipment import Equipment
from app.models.fuel import FuelExpense, FuelIncome, FuelType
from app.schemas.fuel import FuelExpenseCreate, FuelIncomeCreate
from app.core.exceptions import NotFoundException, ValidationException
from app.core.utils import month_start, add_months, quantize_total, to_naive_utc
from app.services.ledger import (
    CalendarUnit,
    LedgerBucket,
    bucket_by_calendar_unit,
    expected_fuel_total,
)

logger = logging.getLogger(__name__)

STATISTICS_DEFAULT_MONTHS = 12


class FuelService:
    """Сервис для учёта топлива."""

    def __init__(self, db: Session):
        self.db = db

    def _check_reference(self, model, value: Optional[int], label: str) -> None:
        if value is not None and self.db.get(model, value) is None:
            raise ValidationException(f"{label} с id {value} не существует")

    # ---- Расходы (пробег) ----

    def get_expense(self, expense_id: int) -> FuelExpense:
        expense = self.db.query(FuelExpense).filter(FuelExpense.id == expense_id).first()
        if not expense:
            raise NotFoundException("Запись о топливе", expense_id)
        return expense

    def get_expenses(
        self,
        department_id: Optional[int] = None,
        fuel_type: Optional[FuelType] = None,
        equipment_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[list[FuelExpense], int]:
        query = self.db.query(FuelExpense)
        if department_id is not None:
            query = query.filter(FuelExpense.department_id == department_id)
        if fuel_type is not None:
            query = query.filter(FuelExpense.fuel_type == fuel_type.value)
        if equipment_id is not None:
            query = query.filter(FuelExpense.equipment_id == equipment_id)
        total = query.count()
        items = (
            query.order_by(desc(FuelExpense.entry_date), desc(FuelExpense.id))
            .offset(skip)
            .limit(limit)
            .all()
        )
        return items, total

    def create_expense(self, data: FuelExpenseCreate) -> FuelExpense:
        """Записать пробег; сумма рассчитывается по пробегу и цене за литр."""
        self._check_reference(Department, data.department_id, "Подразделение")
        self._check_reference(Employee, data.responsible_employee_id, "Сотрудник")
        self._check_reference(Equipment, data.equipment_id, "Оборудование")

        if data.current_mileage <= data.previous_mileage:
            raise ValidationException("Текущий пробег должен быть больше предыдущего")

        expected = expected_fuel_total(data.previous_mileage, data.current_mileage, data.price_per_liter)
        if data.total_amount is not None and quantize_total(data.total_amount) != expected:
            raise ValidationException(
                f"total_amount ({data.total_amount}) не совпадает с расчётной суммой ({expected})"
            )

        logger.info(
            "Creating fuel expense: department_id=%s, type=%s, mileage=%s..%s",
            data.department_id, data.fuel_type.value, data.previous_mileage, data.current_mileage,
        )
        expense = FuelExpense(
            department_id=data.department_id,
            responsible_employee_id=data.responsible_employee_id,
            equipment_id=data.equipment_id,
            fuel_type=data.fuel_type.value,
            entry_date=to_naive_utc(data.entry_date),
            previous_mileage=data.previous_mileage,
            current_mileage=data.current_mileage,
            price_per_liter=data.price_per_liter,
            total_amount=expected,
            odometer_image_url=data.odometer_image_url,
        )
        self.db.add(expense)
        self.db.flush()
        self.db.refresh(expense)
        return expense

    def delete_expense(self, expense_id: int) -> None:
        expense = self.get_expense(expense_id)
        self.db.delete(expense)
        self.db.flush()
        logger.info("Deleted fuel expense id=%s", expense_id)

    def get_latest_prior_reading(
        self,
        department_id: int,
        fuel_type: FuelType,
        equipment_id: Optional[int] = None,
    ) -> Optional[FuelExpense]:
        """Последняя запись пробега (опционально по конкретной технике)."""
        query = self.db.query(FuelExpense).filter(
            FuelExpense.department_id == department_id,
            FuelExpense.fuel_type == fuel_type.value,
        )
        if equipment_id is not None:
            query = query.filter(FuelExpense.equipment_id == equipment_id)
        return query.order_by(desc(FuelExpense.created_at), desc(FuelExpense.id)).first()

    # ---- Поступления ----

    def get_income(self, income_id: int) -> FuelIncome:
        income = self.db.query(FuelIncome).filter(FuelIncome.id == income_id).first()
        if not income:
            raise NotFoundException("Поступление топлива", income_id)
        return income

    def get_incomes(
        self,
        department_id: Optional[int] = None,
        fuel_type: Optional[FuelType] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[list[FuelIncome], int]:
        query = self.db.query(FuelIncome)
        if department_id is not None:
            query = query.filter(FuelIncome.department_id == department_id)
        if fuel_type is not None:
            query = query.filter(FuelIncome.fuel_type == fuel_type.value)
        total = query.count()
        items = (
            query.order_by(desc(FuelIncome.transaction_date), desc(FuelIncome.id))
            .offset(skip)
            .limit(limit)
            .all()
        )
        return items, total

    def create_income(self, data: FuelIncomeCreate) -> FuelIncome:
        self._check_reference(Department, data.department_id, "Подразделение")
        self._check_reference(Employee, data.receiver_employee_id, "Сотрудник")

        logger.info(
            "Creating fuel income: department_id=%s, type=%s, amount=%s",
            data.department_id, data.fuel_type.value, data.amount,
        )
        income = FuelIncome(
            department_id=data.department_id,
            receiver_employee_id=data.receiver_employee_id,
            fuel_type=data.fuel_type.value,
            amount=data.amount,
            transaction_date=to_naive_utc(data.transaction_date),
        )
        self.db.add(income)
        self.db.flush()
        self.db.refresh(income)
        return income

    def delete_income(self, income_id: int) -> None:
        income = self.get_income(income_id)
        self.db.delete(income)
        self.db.flush()
        logger.info("Deleted fuel income id=%s", income_id)

    # ---- Остатки и статистика ----

    def compute_balance(self, department_id: int, fuel_type: FuelType) -> Decimal:
        """Сумма поступлений минус суммарный пробег. Не сохраняется, считается каждый раз."""
        incomes = (
            self.db.query(FuelIncome.amount)
            .filter(FuelIncome.department_id == department_id, FuelIncome.fuel_type == fuel_type.value)
            .all()
        )
        expenses = (
            self.db.query(FuelExpense.previous_mileage, FuelExpense.current_mileage)
            .filter(FuelExpense.department_id == department_id, FuelExpense.fuel_type == fuel_type.value)
            .all()
        )
        income_total = sum((row.amount for row in incomes), Decimal(0))
        used_total = sum((row.current_mileage - row.previous_mileage for row in expenses), Decimal(0))
        return quantize_total(income_total - used_total)

    def balances(self, department_id: int) -> dict[FuelType, Decimal]:
        return {fuel_type: self.compute_balance(department_id, fuel_type) for fuel_type in FuelType}

    def statistics(
        self,
        department_id: Optional[int] = None,
        fuel_type: Optional[FuelType] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        unit: CalendarUnit = CalendarUnit.DAY,
    ) -> list[LedgerBucket]:
        """
        Суммы и пробег по дням (или месяцам).

        Без периода берутся 12 месяцев, заканчивающиеся месяцем последней записи.
        """
        query = self.db.query(FuelExpense)
        if department_id is not None:
            query = query.filter(FuelExpense.department_id == department_id)
        if fuel_type is not None:
            query = query.filter(FuelExpense.fuel_type == fuel_type.value)

        if start is None and end is None:
            latest = query.order_by(desc(FuelExpense.entry_date)).first()
            if latest is None:
                return []
            start = add_months(month_start(latest.entry_date), -(STATISTICS_DEFAULT_MONTHS - 1))

        if start is not None:
            query = query.filter(FuelExpense.entry_date >= datetime.combine(start, time.min))
        if end is not None:
            query = query.filter(FuelExpense.entry_date < datetime.combine(end + timedelta(days=1), time.min))

        return bucket_by_calendar_unit(query.all(), unit)
