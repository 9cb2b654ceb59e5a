"""Тесты сервиса сотрудников."""
from datetime import date

import pytest

from app.core.exceptions import NotFoundException, ValidationException
from app.schemas.department import DepartmentCreate
from app.schemas.employee import EmployeeCreate, EmployeeUpdate
from app.services.department_service import DepartmentService
from app.services.employee_service import EmployeeService
from app.services.sentinel_service import SentinelService


class TestEmployeeService:
    """Тесты EmployeeService."""

    def test_create_defaults(self, db_session):
        employee = EmployeeService(db_session).create(EmployeeCreate(call_sign="Falcon"))
        assert employee.id is not None
        assert employee.role == "Worker"
        assert employee.hire_date == date.today()
        assert employee.specialization_name == "Intern"

    def test_unassigned_employee_display_names(self, db_session):
        employee = EmployeeService(db_session).create(EmployeeCreate(call_sign="Falcon"))
        assert employee.department_name == "Reserve"
        assert employee.position_name == "Unemployed"

    def test_create_with_unknown_department(self, db_session):
        with pytest.raises(ValidationException):
            EmployeeService(db_session).create(EmployeeCreate(call_sign="Falcon", department_id=42))

    def test_update_rejects_null_specialization(self, db_session):
        service = EmployeeService(db_session)
        employee = service.create(EmployeeCreate(call_sign="Falcon"))
        with pytest.raises(ValidationException):
            service.update(employee, EmployeeUpdate(specialization_id=None))

    def test_update_revalidates_references(self, db_session):
        service = EmployeeService(db_session)
        employee = service.create(EmployeeCreate(call_sign="Falcon"))
        with pytest.raises(ValidationException):
            service.update(employee, EmployeeUpdate(position_id=777))

    def test_update_fields(self, db_session):
        service = EmployeeService(db_session)
        employee = service.create(EmployeeCreate(call_sign="Falcon"))
        updated = service.update(employee, EmployeeUpdate(first_name="Ivan", phone_number="+380501112233"))
        assert updated.first_name == "Ivan"
        assert updated.phone_number == "+380501112233"
        assert updated.call_sign == "Falcon"

    def test_filter_by_reserve_includes_unassigned(self, seeded_db):
        service = EmployeeService(seeded_db)
        alpha = DepartmentService(seeded_db).create(DepartmentCreate(name="Alpha"))
        service.create(EmployeeCreate(call_sign="Loner"))
        service.create(EmployeeCreate(call_sign="Member", department_id=alpha.id))
        reserve = SentinelService(seeded_db).reserve_department()

        items, total = service.get_all(department_id=reserve.id)

        assert total == 1
        assert items[0].call_sign == "Loner"

    def test_search_and_sort(self, db_session):
        service = EmployeeService(db_session)
        service.create(EmployeeCreate(call_sign="Bravo", last_name="Shevchenko"))
        service.create(EmployeeCreate(call_sign="Alpha", last_name="Kovalenko"))
        service.create(EmployeeCreate(call_sign="Charlie", last_name="Shevchuk"))

        items, total = service.get_all(search="shev", sort_by="call_sign", sort_order="desc")

        assert total == 2
        assert [e.call_sign for e in items] == ["Charlie", "Bravo"]

    def test_paging(self, db_session):
        service = EmployeeService(db_session)
        for sign in ("A", "B", "C"):
            service.create(EmployeeCreate(call_sign=sign))
        items, total = service.get_all(skip=1, limit=1)
        assert total == 3
        assert [e.call_sign for e in items] == ["B"]

    def test_delete(self, db_session):
        service = EmployeeService(db_session)
        employee = service.create(EmployeeCreate(call_sign="Falcon"))
        service.delete(employee.id)
        with pytest.raises(NotFoundException):
            service.get(employee.id)
