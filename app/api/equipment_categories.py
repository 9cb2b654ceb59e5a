"""
API endpoints для категорий оборудования.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.equipment import (
    EquipmentCategoryCreate,
    EquipmentCategoryUpdate,
    EquipmentCategoryResponse,
    EquipmentCategoryListResponse,
)
from app.services.equipment_service import EquipmentCategoryService

router = APIRouter(prefix="/equipment-categories", tags=["equipment"])


@router.get("", response_model=EquipmentCategoryListResponse)
def list_categories(db: Session = Depends(get_db)):
    categories = EquipmentCategoryService(db).get_all()
    return EquipmentCategoryListResponse(
        items=[EquipmentCategoryResponse.model_validate(c) for c in categories],
        total=len(categories),
    )


@router.get("/{category_id}", response_model=EquipmentCategoryResponse)
def get_category(category_id: int, db: Session = Depends(get_db)):
    category = EquipmentCategoryService(db).get(category_id)
    return EquipmentCategoryResponse.model_validate(category)


@router.post("", response_model=EquipmentCategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(data: EquipmentCategoryCreate, db: Session = Depends(get_db)):
    category = EquipmentCategoryService(db).create(data)
    return EquipmentCategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=EquipmentCategoryResponse)
def update_category(category_id: int, data: EquipmentCategoryUpdate, db: Session = Depends(get_db)):
    service = EquipmentCategoryService(db)
    category = service.get(category_id)
    updated = service.update(category, data)
    return EquipmentCategoryResponse.model_validate(updated)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """Удалить категорию (409, если она используется)."""
    EquipmentCategoryService(db).delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
