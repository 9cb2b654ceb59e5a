"""
API endpoints для управления должностями.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.position import (
    PositionCreate,
    PositionUpdate,
    PositionResponse,
    PositionListResponse,
)
from app.services.position_service import PositionService

router = APIRouter(prefix="/positions", tags=["positions"])


@router.get("", response_model=PositionListResponse)
def list_positions(
    department_id: Optional[int] = Query(None, description="Только должности подразделения"),
    db: Session = Depends(get_db),
):
    """Получить список должностей."""
    positions = PositionService(db).get_all(department_id=department_id)
    return PositionListResponse(
        items=[PositionResponse.model_validate(p) for p in positions],
        total=len(positions),
    )


@router.get("/{position_id}", response_model=PositionResponse)
def get_position(position_id: int, db: Session = Depends(get_db)):
    position = PositionService(db).get(position_id)
    return PositionResponse.model_validate(position)


@router.post("", response_model=PositionResponse, status_code=status.HTTP_201_CREATED)
def create_position(data: PositionCreate, db: Session = Depends(get_db)):
    """Создать должность."""
    position = PositionService(db).create(data)
    return PositionResponse.model_validate(position)


@router.put("/{position_id}", response_model=PositionResponse)
def update_position(position_id: int, data: PositionUpdate, db: Session = Depends(get_db)):
    """Обновить название и подразделения должности."""
    service = PositionService(db)
    position = service.get(position_id)
    updated = service.update(position, data)
    return PositionResponse.model_validate(updated)


@router.delete("/{position_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_position(position_id: int, db: Session = Depends(get_db)):
    """Удалить должность; сотрудники переводятся на Unemployed."""
    PositionService(db).delete(position_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
