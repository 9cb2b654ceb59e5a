"""
Сервис коммунальных платежей: запись, поиск последних показаний, статистика.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.models.department import Department
from app.models.employee import Employee
from app.models.utility_payment import UtilityPayment, PaymentType
from app.schemas.utility_payment import UtilityPaymentCreate
from app.core.exceptions import NotFoundException, ValidationException
from app.core.utils import month_start, add_months, quantize_total
from app.services.ledger import (
    CalendarUnit,
    LedgerBucket,
    bucket_by_calendar_unit,
    expected_utility_total,
)

logger = logging.getLogger(__name__)

STATISTICS_DEFAULT_MONTHS = 12


class UtilityPaymentService:
    """Сервис для управления коммунальными платежами."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, payment_id: int) -> UtilityPayment:
        payment = self.db.query(UtilityPayment).filter(UtilityPayment.id == payment_id).first()
        if not payment:
            raise NotFoundException("Платёж", payment_id)
        return payment

    def get_all(
        self,
        department_id: Optional[int] = None,
        payment_type: Optional[PaymentType] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[list[UtilityPayment], int]:
        query = self.db.query(UtilityPayment)
        if department_id is not None:
            query = query.filter(UtilityPayment.department_id == department_id)
        if payment_type is not None:
            query = query.filter(UtilityPayment.payment_type == payment_type.value)
        total = query.count()
        items = (
            query.order_by(desc(UtilityPayment.payment_month), desc(UtilityPayment.created_at), desc(UtilityPayment.id))
            .offset(skip)
            .limit(limit)
            .all()
        )
        return items, total

    def _validate_readings(self, data: UtilityPaymentCreate) -> Decimal:
        """Проверить показания и вернуть итоговую сумму платежа."""
        zones = (
            ("previous_value", "current_value", data.previous_value, data.current_value),
            ("previous_value_night", "current_value_night", data.previous_value_night, data.current_value_night),
        )
        for previous_name, current_name, previous, current in zones:
            if (previous is None) != (current is None):
                raise ValidationException(f"Поля {previous_name} и {current_name} указываются вместе")
            if previous is not None and current < previous:
                raise ValidationException(
                    f"{current_name} ({current}) не может быть меньше {previous_name} ({previous})"
                )

        has_night = data.current_value_night is not None
        if has_night and data.price_per_unit_night is None:
            raise ValidationException("Для ночных показаний нужен price_per_unit_night")

        if data.current_value is None:
            if has_night:
                raise ValidationException("Ночные показания указываются только вместе с дневными")
            # Платёж без счётчика (например, аренда): сумма обязательна
            if data.total_amount is None:
                raise ValidationException("Для платежа без показаний нужно указать total_amount")
            return quantize_total(data.total_amount)

        expected = expected_utility_total(
            data.previous_value,
            data.current_value,
            data.price_per_unit,
            data.previous_value_night,
            data.current_value_night,
            data.price_per_unit_night if has_night else None,
        )
        if data.total_amount is not None and quantize_total(data.total_amount) != expected:
            raise ValidationException(
                f"total_amount ({data.total_amount}) не совпадает с расчётной суммой ({expected})"
            )
        return expected

    def create(self, data: UtilityPaymentCreate) -> UtilityPayment:
        """Создать платёж. payment_month приводится к первому числу месяца."""
        if self.db.get(Department, data.department_id) is None:
            raise ValidationException(f"Подразделение с id {data.department_id} не существует")
        if (
            data.responsible_employee_id is not None
            and self.db.get(Employee, data.responsible_employee_id) is None
        ):
            raise ValidationException(f"Сотрудник с id {data.responsible_employee_id} не существует")

        total_amount = self._validate_readings(data)

        logger.info(
            "Creating utility payment: department_id=%s, type=%s, month=%s, total=%s",
            data.department_id, data.payment_type.value, data.payment_month, total_amount,
        )
        payment = UtilityPayment(
            department_id=data.department_id,
            responsible_employee_id=data.responsible_employee_id,
            payment_type=data.payment_type.value,
            previous_value=data.previous_value,
            current_value=data.current_value,
            previous_value_night=data.previous_value_night,
            current_value_night=data.current_value_night,
            price_per_unit=data.price_per_unit,
            price_per_unit_night=data.price_per_unit_night,
            total_amount=total_amount,
            bill_image_url=data.bill_image_url,
            payment_month=month_start(data.payment_month),
        )
        self.db.add(payment)
        self.db.flush()
        self.db.refresh(payment)
        return payment

    def delete(self, payment_id: int) -> None:
        payment = self.get(payment_id)
        self.db.delete(payment)
        self.db.flush()
        logger.info("Deleted utility payment id=%s", payment_id)

    def get_latest_prior_reading(
        self,
        department_id: int,
        payment_type: PaymentType,
        before_month: Optional[date] = None,
    ) -> Optional[UtilityPayment]:
        """
        Последний платёж подразделения данного типа.

        Если указан before_month, учитываются только платежи за месяцы
        строго раньше него. None означает отсутствие данных, не ошибку.
        """
        query = self.db.query(UtilityPayment).filter(
            UtilityPayment.department_id == department_id,
            UtilityPayment.payment_type == payment_type.value,
        )
        if before_month is not None:
            query = query.filter(UtilityPayment.payment_month < month_start(before_month))
        return query.order_by(desc(UtilityPayment.created_at), desc(UtilityPayment.id)).first()

    def statistics(
        self,
        payment_type: PaymentType,
        department_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[LedgerBucket]:
        """
        Помесячные суммы и потребление.

        Без периода берутся 12 месяцев, заканчивающиеся месяцем
        последнего платежа.
        """
        query = self.db.query(UtilityPayment).filter(UtilityPayment.payment_type == payment_type.value)
        if department_id is not None:
            query = query.filter(UtilityPayment.department_id == department_id)

        if start is None and end is None:
            latest = query.order_by(desc(UtilityPayment.payment_month)).first()
            if latest is None:
                return []
            end = latest.payment_month
            start = add_months(month_start(end), -(STATISTICS_DEFAULT_MONTHS - 1))

        if start is not None:
            query = query.filter(UtilityPayment.payment_month >= month_start(start))
        if end is not None:
            query = query.filter(UtilityPayment.payment_month <= end)

        return bucket_by_calendar_unit(query.all(), CalendarUnit.MONTH)
