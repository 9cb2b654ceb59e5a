"""
API endpoints для графика работы.
"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.schedule import ScheduleState
from app.schemas.schedule import (
    ScheduleEntryCreate,
    ScheduleEntryUpdate,
    ScheduleEntryResponse,
    ScheduleEntryListResponse,
)
from app.services.schedule_service import ScheduleService

router = APIRouter(prefix="/schedule", tags=["schedule"])


def _to_list(entries) -> ScheduleEntryListResponse:
    return ScheduleEntryListResponse(
        items=[ScheduleEntryResponse.model_validate(e) for e in entries],
        total=len(entries),
    )


@router.get("", response_model=ScheduleEntryListResponse)
def list_entries(
    department_id: Optional[int] = Query(None),
    start: Optional[datetime] = Query(None, description="Начало периода"),
    end: Optional[datetime] = Query(None, description="Конец периода"),
    position_id: Optional[int] = Query(None),
    state: Optional[ScheduleState] = Query(None),
    db: Session = Depends(get_db),
):
    """Записи графика; при заданном периоде включаются пересекающиеся смены."""
    entries = ScheduleService(db).get_all(
        department_id=department_id,
        start=start,
        end=end,
        position_id=position_id,
        state=state,
    )
    return _to_list(entries)


@router.get("/timeline", response_model=ScheduleEntryListResponse)
def timeline(
    department_id: Optional[int] = Query(None),
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    position_id: Optional[int] = Query(None),
    state: Optional[ScheduleState] = Query(None),
    db: Session = Depends(get_db),
):
    """Те же записи для отображения на временной шкале."""
    return list_entries(department_id, start, end, position_id, state, db)


@router.get("/now", response_model=ScheduleEntryListResponse)
def current_shifts(db: Session = Depends(get_db)):
    """Сотрудники, находящиеся на смене сейчас."""
    return _to_list(ScheduleService(db).get_current())


@router.get("/{entry_id}", response_model=ScheduleEntryResponse)
def get_entry(entry_id: int, db: Session = Depends(get_db)):
    entry = ScheduleService(db).get(entry_id)
    return ScheduleEntryResponse.model_validate(entry)


@router.post("", response_model=ScheduleEntryResponse, status_code=status.HTTP_201_CREATED)
def create_entry(data: ScheduleEntryCreate, db: Session = Depends(get_db)):
    """Создать запись графика."""
    entry = ScheduleService(db).create(data)
    return ScheduleEntryResponse.model_validate(entry)


@router.put("/{entry_id}", response_model=ScheduleEntryResponse)
def update_entry(entry_id: int, data: ScheduleEntryUpdate, db: Session = Depends(get_db)):
    service = ScheduleService(db)
    entry = service.get(entry_id)
    updated = service.update(entry, data)
    return ScheduleEntryResponse.model_validate(updated)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(entry_id: int, db: Session = Depends(get_db)):
    ScheduleService(db).delete(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
