"""Тесты сервиса учёта топлива."""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.core.exceptions import ValidationException
from app.models.fuel import FuelType
from app.schemas.department import DepartmentCreate
from app.schemas.equipment import EquipmentCategoryCreate, EquipmentCreate
from app.schemas.fuel import FuelExpenseCreate, FuelIncomeCreate
from app.services.department_service import DepartmentService
from app.services.equipment_service import EquipmentCategoryService, EquipmentService
from app.services.fuel_service import FuelService
from app.services.ledger import CalendarUnit


@pytest.fixture
def department(db_session):
    return DepartmentService(db_session).create(DepartmentCreate(name="Alpha"))


def expense(department_id, previous, current, price="50", when=datetime(2024, 3, 10, 8, 0), **extra):
    return FuelExpenseCreate(
        department_id=department_id,
        fuel_type=FuelType.diesel,
        entry_date=when,
        previous_mileage=Decimal(previous),
        current_mileage=Decimal(current),
        price_per_liter=Decimal(price),
        **extra,
    )


def income(department_id, amount, fuel_type=FuelType.diesel):
    return FuelIncomeCreate(
        department_id=department_id,
        fuel_type=fuel_type,
        amount=Decimal(amount),
        transaction_date=datetime(2024, 3, 1, 9, 0),
    )


class TestFuelBalance:
    """Остаток топлива."""

    def test_balance_scenario(self, db_session, department):
        service = FuelService(db_session)
        service.create_expense(expense(department.id, "100", "150"))
        service.create_income(income(department.id, "40"))

        assert service.compute_balance(department.id, FuelType.diesel) == Decimal("-10")

    def test_balance_without_records(self, db_session, department):
        assert FuelService(db_session).compute_balance(department.id, FuelType.gas) == Decimal("0")

    def test_balances_per_fuel_type(self, db_session, department):
        service = FuelService(db_session)
        service.create_income(income(department.id, "100", FuelType.gasoline))
        service.create_income(income(department.id, "30"))

        balances = service.balances(department.id)

        assert balances[FuelType.gasoline] == Decimal("100")
        assert balances[FuelType.diesel] == Decimal("30")
        assert balances[FuelType.gas] == Decimal("0")

    def test_balance_recomputed_after_delete(self, db_session, department):
        service = FuelService(db_session)
        record = service.create_expense(expense(department.id, "100", "150"))
        service.create_income(income(department.id, "40"))
        service.delete_expense(record.id)
        assert service.compute_balance(department.id, FuelType.diesel) == Decimal("40")


class TestFuelExpenseCreate:
    """Проверки при записи пробега."""

    def test_total_computed(self, db_session, department):
        record = FuelService(db_session).create_expense(expense(department.id, "1000", "1050"))
        assert record.total_amount == Decimal("2500")
        assert record.consumption == Decimal("50")

    def test_mileage_must_grow(self, db_session, department):
        with pytest.raises(ValidationException):
            FuelService(db_session).create_expense(expense(department.id, "1000", "1000"))

    def test_wrong_total_rejected(self, db_session, department):
        with pytest.raises(ValidationException):
            FuelService(db_session).create_expense(
                expense(department.id, "1000", "1050", total_amount=Decimal("1"))
            )

    def test_aware_entry_date_stored_as_utc(self, db_session, department):
        kyiv = timezone(timedelta(hours=2))
        record = FuelService(db_session).create_expense(
            expense(department.id, "1", "2", when=datetime(2024, 3, 10, 1, 0, tzinfo=kyiv))
        )
        assert record.entry_date == datetime(2024, 3, 9, 23, 0)


class TestLatestFuelReading:
    """Последний пробег."""

    def test_no_prior_data(self, db_session, department):
        assert FuelService(db_session).get_latest_prior_reading(department.id, FuelType.diesel) is None

    def test_equal_created_at_higher_id_wins(self, db_session, department):
        service = FuelService(db_session)
        first = service.create_expense(expense(department.id, "5000", "5100"))
        second = service.create_expense(expense(department.id, "100", "200"))
        stamp = datetime(2024, 3, 10, 9, 0)
        first.created_at = stamp
        second.created_at = stamp
        db_session.flush()

        latest = service.get_latest_prior_reading(department.id, FuelType.diesel)

        assert second.id > first.id
        assert latest.id == second.id
        assert latest.current_mileage == Decimal("200")

    def test_filter_by_equipment(self, db_session, department):
        category = EquipmentCategoryService(db_session).create(EquipmentCategoryCreate(name="Vehicles"))
        truck = EquipmentService(db_session).create(
            EquipmentCreate(name="Truck", purchase_date=date(2023, 5, 1), category_id=category.id)
        )
        service = FuelService(db_session)
        service.create_expense(expense(department.id, "100", "200", equipment_id=truck.id))
        service.create_expense(expense(department.id, "5000", "5100"))

        latest_any = service.get_latest_prior_reading(department.id, FuelType.diesel)
        latest_truck = service.get_latest_prior_reading(
            department.id, FuelType.diesel, equipment_id=truck.id
        )

        assert latest_any.current_mileage == Decimal("5100")
        assert latest_truck.current_mileage == Decimal("200")


class TestFuelStatistics:
    """Статистика по дням и месяцам."""

    def test_daily_buckets(self, db_session, department):
        service = FuelService(db_session)
        service.create_expense(expense(department.id, "0", "10", when=datetime(2024, 3, 10, 8, 0)))
        service.create_expense(expense(department.id, "10", "30", when=datetime(2024, 3, 10, 17, 0)))
        service.create_expense(expense(department.id, "30", "35", when=datetime(2024, 3, 12, 8, 0)))

        buckets = service.statistics(department_id=department.id)

        assert [(b.key, b.consumption) for b in buckets] == [
            ("2024-03-10", Decimal("30")),
            ("2024-03-12", Decimal("5")),
        ]

    def test_monthly_buckets(self, db_session, department):
        service = FuelService(db_session)
        service.create_expense(expense(department.id, "0", "10", when=datetime(2024, 3, 10)))
        service.create_expense(expense(department.id, "10", "30", when=datetime(2024, 4, 2)))

        buckets = service.statistics(unit=CalendarUnit.MONTH)

        assert [(b.key, b.total_amount) for b in buckets] == [
            ("2024-03", Decimal("500")),
            ("2024-04", Decimal("1000")),
        ]

    def test_end_date_inclusive(self, db_session, department):
        service = FuelService(db_session)
        service.create_expense(expense(department.id, "0", "10", when=datetime(2024, 3, 10, 23, 30)))
        service.create_expense(expense(department.id, "10", "20", when=datetime(2024, 3, 11, 0, 30)))

        buckets = service.statistics(start=date(2024, 3, 10), end=date(2024, 3, 10))

        assert [b.key for b in buckets] == ["2024-03-10"]
