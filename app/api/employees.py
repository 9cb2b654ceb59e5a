"""
API endpoints для управления сотрудниками.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.common import SortOrder
from app.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeListResponse,
    EmployeeSortField,
)
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeeListResponse)
def list_employees(
    department_id: Optional[int] = Query(None),
    position_id: Optional[int] = Query(None),
    search: Optional[str] = Query(None, description="Поиск по позывному, имени, фамилии, телефону"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    sort_by: EmployeeSortField = Query("call_sign"),
    sort_order: SortOrder = Query("asc"),
    db: Session = Depends(get_db),
):
    """Получить список сотрудников."""
    employees, total = EmployeeService(db).get_all(
        department_id=department_id,
        position_id=position_id,
        search=search,
        skip=skip,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return EmployeeListResponse(
        items=[EmployeeResponse.model_validate(e) for e in employees],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    """Получить сотрудника по ID."""
    employee = EmployeeService(db).get(employee_id)
    return EmployeeResponse.model_validate(employee)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(data: EmployeeCreate, db: Session = Depends(get_db)):
    """Создать нового сотрудника."""
    employee = EmployeeService(db).create(data)
    return EmployeeResponse.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    data: EmployeeUpdate,
    db: Session = Depends(get_db),
):
    """Обновить данные сотрудника."""
    service = EmployeeService(db)
    employee = service.get(employee_id)
    updated = service.update(employee, data)
    return EmployeeResponse.model_validate(updated)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    EmployeeService(db).delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
