"""
API endpoints для управления оборудованием.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.equipment import EquipmentStatus, Measurement
from app.schemas.common import SortOrder
from app.schemas.equipment import (
    EquipmentCreate,
    EquipmentUpdate,
    EquipmentResponse,
    EquipmentListResponse,
    EquipmentSortField,
)
from app.services.equipment_service import EquipmentService

router = APIRouter(prefix="/equipment", tags=["equipment"])


@router.get("", response_model=EquipmentListResponse)
def list_equipment(
    department_id: Optional[int] = Query(None),
    category_id: Optional[int] = Query(None),
    search: Optional[str] = Query(None, description="Поиск по названию, серийному номеру, описанию"),
    equipment_status: Optional[EquipmentStatus] = Query(None, alias="status"),
    measurement: Optional[Measurement] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    sort_by: EquipmentSortField = Query("name"),
    sort_order: SortOrder = Query("asc"),
    db: Session = Depends(get_db),
):
    """Получить список оборудования."""
    items, total = EquipmentService(db).get_all(
        department_id=department_id,
        category_id=category_id,
        search=search,
        status=equipment_status.value if equipment_status else None,
        measurement=measurement.value if measurement else None,
        skip=skip,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return EquipmentListResponse(
        items=[EquipmentResponse.model_validate(e) for e in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/{equipment_id}", response_model=EquipmentResponse)
def get_equipment(equipment_id: int, db: Session = Depends(get_db)):
    equipment = EquipmentService(db).get(equipment_id)
    return EquipmentResponse.model_validate(equipment)


@router.post("", response_model=EquipmentResponse, status_code=status.HTTP_201_CREATED)
def create_equipment(data: EquipmentCreate, db: Session = Depends(get_db)):
    """Создать единицу оборудования."""
    equipment = EquipmentService(db).create(data)
    return EquipmentResponse.model_validate(equipment)


@router.put("/{equipment_id}", response_model=EquipmentResponse)
def update_equipment(equipment_id: int, data: EquipmentUpdate, db: Session = Depends(get_db)):
    """Обновить оборудование."""
    service = EquipmentService(db)
    equipment = service.get(equipment_id)
    updated = service.update(equipment, data)
    return EquipmentResponse.model_validate(updated)


@router.delete("/{equipment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_equipment(equipment_id: int, db: Session = Depends(get_db)):
    EquipmentService(db).delete(equipment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
