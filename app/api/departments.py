"""
API endpoints для управления подразделениями.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.department import (
    DepartmentCreate,
    DepartmentUpdate,
    DepartmentResponse,
    DepartmentDetailResponse,
    DepartmentListResponse,
    DepartmentPositionShort,
    DepartmentEmployeeShort,
    DepartmentEquipmentShort,
)
from app.services.department_service import DepartmentService

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=DepartmentListResponse)
def list_departments(db: Session = Depends(get_db)):
    """Получить список подразделений."""
    departments = DepartmentService(db).get_all()
    return DepartmentListResponse(
        items=[DepartmentResponse.model_validate(d) for d in departments],
        total=len(departments),
    )


@router.get("/{department_id}", response_model=DepartmentDetailResponse)
def get_department(department_id: int, db: Session = Depends(get_db)):
    """Подразделение с должностями, сотрудниками и оборудованием."""
    service = DepartmentService(db)
    department = service.get(department_id)
    return DepartmentDetailResponse(
        id=department.id,
        name=department.name,
        is_sentinel=department.is_sentinel,
        positions=[DepartmentPositionShort.model_validate(p) for p in service.get_positions(department)],
        employees=[DepartmentEmployeeShort.model_validate(e) for e in service.get_employees(department)],
        equipment=[DepartmentEquipmentShort.model_validate(e) for e in service.get_equipment(department)],
    )


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
def create_department(data: DepartmentCreate, db: Session = Depends(get_db)):
    """Создать подразделение."""
    department = DepartmentService(db).create(data)
    return DepartmentResponse.model_validate(department)


@router.put("/{department_id}", response_model=DepartmentResponse)
def update_department(department_id: int, data: DepartmentUpdate, db: Session = Depends(get_db)):
    """Переименовать подразделение."""
    service = DepartmentService(db)
    department = service.get(department_id)
    updated = service.update(department, data)
    return DepartmentResponse.model_validate(updated)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(department_id: int, db: Session = Depends(get_db)):
    """Удалить подразделение с переводом сотрудников в Резерв."""
    DepartmentService(db).delete(department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
