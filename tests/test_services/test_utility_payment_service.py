"""Тесты сервиса коммунальных платежей."""
from datetime import date, datetime
from decimal import Decimal

import pytest

from app.core.exceptions import ValidationException, NotFoundException
from app.models.utility_payment import PaymentType
from app.schemas.department import DepartmentCreate
from app.schemas.utility_payment import UtilityPaymentCreate
from app.services.department_service import DepartmentService
from app.services.utility_payment_service import UtilityPaymentService


@pytest.fixture
def department(db_session):
    return DepartmentService(db_session).create(DepartmentCreate(name="Alpha"))


def electricity(department_id, month, previous, current, price="2", **extra):
    return UtilityPaymentCreate(
        department_id=department_id,
        payment_type=PaymentType.electricity,
        previous_value=Decimal(previous),
        current_value=Decimal(current),
        price_per_unit=Decimal(price),
        payment_month=month,
        **extra,
    )


class TestUtilityPaymentCreate:
    """Проверки при записи платежа."""

    def test_total_computed(self, db_session, department):
        payment = UtilityPaymentService(db_session).create(
            electricity(department.id, date(2024, 1, 15), "100", "150")
        )
        assert payment.total_amount == Decimal("100")
        assert payment.consumption == Decimal("50")

    def test_month_normalized_to_first_day(self, db_session, department):
        payment = UtilityPaymentService(db_session).create(
            electricity(department.id, date(2024, 1, 15), "100", "150")
        )
        assert payment.payment_month == date(2024, 1, 1)

    def test_two_zone_total(self, db_session, department):
        payment = UtilityPaymentService(db_session).create(
            electricity(
                department.id, date(2024, 1, 1), "100", "150",
                previous_value_night=Decimal("10"),
                current_value_night=Decimal("30"),
                price_per_unit_night=Decimal("1"),
            )
        )
        assert payment.total_amount == Decimal("120")
        assert payment.consumption == Decimal("70")

    def test_current_below_previous_rejected(self, db_session, department):
        with pytest.raises(ValidationException):
            UtilityPaymentService(db_session).create(
                electricity(department.id, date(2024, 1, 1), "150", "100")
            )

    def test_wrong_total_rejected(self, db_session, department):
        with pytest.raises(ValidationException):
            UtilityPaymentService(db_session).create(
                electricity(department.id, date(2024, 1, 1), "100", "150", total_amount=Decimal("99"))
            )

    def test_matching_total_accepted(self, db_session, department):
        payment = UtilityPaymentService(db_session).create(
            electricity(department.id, date(2024, 1, 1), "100", "150", total_amount=Decimal("100.000"))
        )
        assert payment.total_amount == Decimal("100")

    def test_rent_requires_total(self, db_session, department):
        data = UtilityPaymentCreate(
            department_id=department.id,
            payment_type=PaymentType.rent,
            price_per_unit=Decimal("0"),
            payment_month=date(2024, 1, 1),
        )
        with pytest.raises(ValidationException):
            UtilityPaymentService(db_session).create(data)

    def test_unknown_department_rejected(self, db_session):
        with pytest.raises(ValidationException):
            UtilityPaymentService(db_session).create(electricity(999, date(2024, 1, 1), "1", "2"))

    def test_delete(self, db_session, department):
        service = UtilityPaymentService(db_session)
        payment = service.create(electricity(department.id, date(2024, 1, 1), "1", "2"))
        service.delete(payment.id)
        with pytest.raises(NotFoundException):
            service.get(payment.id)


class TestLatestPriorReading:
    """Поиск последних показаний."""

    def test_no_prior_data(self, db_session, department):
        result = UtilityPaymentService(db_session).get_latest_prior_reading(
            department.id, PaymentType.electricity
        )
        assert result is None

    def test_single_record(self, db_session, department):
        service = UtilityPaymentService(db_session)
        service.create(electricity(department.id, date(2024, 1, 1), "100", "150"))
        result = service.get_latest_prior_reading(department.id, PaymentType.electricity)
        assert result.current_value == Decimal("150")

    def test_latest_created_wins(self, db_session, department):
        service = UtilityPaymentService(db_session)
        service.create(electricity(department.id, date(2024, 1, 1), "100", "150"))
        service.create(electricity(department.id, date(2024, 2, 1), "150", "190"))
        result = service.get_latest_prior_reading(department.id, PaymentType.electricity)
        assert result.current_value == Decimal("190")

    def test_equal_created_at_higher_id_wins(self, db_session, department):
        service = UtilityPaymentService(db_session)
        newer_month = service.create(electricity(department.id, date(2024, 2, 1), "150", "190"))
        older_month = service.create(electricity(department.id, date(2024, 1, 1), "100", "150"))
        stamp = datetime(2024, 2, 5, 12, 0)
        newer_month.created_at = stamp
        older_month.created_at = stamp
        db_session.flush()

        result = service.get_latest_prior_reading(department.id, PaymentType.electricity)

        assert older_month.id > newer_month.id
        assert result.id == older_month.id

    def test_before_month(self, db_session, department):
        service = UtilityPaymentService(db_session)
        service.create(electricity(department.id, date(2024, 1, 1), "100", "150"))
        service.create(electricity(department.id, date(2024, 2, 1), "150", "190"))
        result = service.get_latest_prior_reading(
            department.id, PaymentType.electricity, before_month=date(2024, 2, 20)
        )
        assert result.payment_month == date(2024, 1, 1)

    def test_other_type_ignored(self, db_session, department):
        service = UtilityPaymentService(db_session)
        service.create(electricity(department.id, date(2024, 1, 1), "100", "150"))
        assert service.get_latest_prior_reading(department.id, PaymentType.water) is None


class TestUtilityStatistics:
    """Помесячная статистика."""

    def test_monthly_buckets(self, db_session, department):
        service = UtilityPaymentService(db_session)
        service.create(electricity(department.id, date(2024, 1, 1), "0", "50"))
        service.create(electricity(department.id, date(2024, 1, 1), "50", "75"))
        service.create(electricity(department.id, date(2024, 2, 1), "75", "115"))

        buckets = service.statistics(PaymentType.electricity, department_id=department.id)

        assert {b.key: b.total_amount for b in buckets} == {
            "2024-01": Decimal("150"),
            "2024-02": Decimal("80"),
        }

    def test_default_range_is_twelve_months(self, db_session, department):
        service = UtilityPaymentService(db_session)
        service.create(electricity(department.id, date(2023, 1, 1), "0", "1"))
        service.create(electricity(department.id, date(2023, 2, 1), "1", "2"))
        service.create(electricity(department.id, date(2024, 1, 1), "2", "3"))

        keys = [b.key for b in service.statistics(PaymentType.electricity)]

        assert keys == ["2023-02", "2024-01"]

    def test_explicit_range(self, db_session, department):
        service = UtilityPaymentService(db_session)
        for month in (1, 2, 3):
            service.create(electricity(department.id, date(2024, month, 1), "0", "1"))
        buckets = service.statistics(
            PaymentType.electricity, start=date(2024, 2, 10), end=date(2024, 2, 28)
        )
        assert [b.key for b in buckets] == ["2024-02"]

    def test_empty(self, db_session):
        assert UtilityPaymentService(db_session).statistics(PaymentType.gas) == []
