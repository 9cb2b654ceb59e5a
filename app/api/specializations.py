"""
API endpoints для специализаций.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.specialization import (
    SpecializationCreate,
    SpecializationUpdate,
    SpecializationResponse,
    SpecializationListResponse,
)
from app.services.specialization_service import SpecializationService

router = APIRouter(prefix="/specializations", tags=["specializations"])


@router.get("", response_model=SpecializationListResponse)
def list_specializations(db: Session = Depends(get_db)):
    specializations = SpecializationService(db).get_all()
    return SpecializationListResponse(
        items=[SpecializationResponse.model_validate(s) for s in specializations],
        total=len(specializations),
    )


@router.get("/{specialization_id}", response_model=SpecializationResponse)
def get_specialization(specialization_id: int, db: Session = Depends(get_db)):
    specialization = SpecializationService(db).get(specialization_id)
    return SpecializationResponse.model_validate(specialization)


@router.post("", response_model=SpecializationResponse, status_code=status.HTTP_201_CREATED)
def create_specialization(data: SpecializationCreate, db: Session = Depends(get_db)):
    specialization = SpecializationService(db).create(data)
    return SpecializationResponse.model_validate(specialization)


@router.put("/{specialization_id}", response_model=SpecializationResponse)
def update_specialization(
    specialization_id: int,
    data: SpecializationUpdate,
    db: Session = Depends(get_db),
):
    service = SpecializationService(db)
    specialization = service.get(specialization_id)
    updated = service.update(specialization, data)
    return SpecializationResponse.model_validate(updated)


@router.delete("/{specialization_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_specialization(specialization_id: int, db: Session = Depends(get_db)):
    """Удалить специализацию; сотрудники получают Intern."""
    SpecializationService(db).delete(specialization_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
