"""
API endpoints для коммунальных платежей.
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.utility_payment import PaymentType
from app.schemas.ledger import LedgerStatisticsResponse
from app.schemas.utility_payment import (
    UtilityPaymentCreate,
    UtilityPaymentResponse,
    UtilityPaymentListResponse,
    LatestUtilityReadingResponse,
)
from app.services.utility_payment_service import UtilityPaymentService

router = APIRouter(prefix="/utility-payments", tags=["utility-payments"])


@router.get("", response_model=UtilityPaymentListResponse)
def list_payments(
    department_id: Optional[int] = Query(None),
    payment_type: Optional[PaymentType] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """Получить список платежей (новые первыми)."""
    items, total = UtilityPaymentService(db).get_all(
        department_id=department_id,
        payment_type=payment_type,
        skip=skip,
        limit=limit,
    )
    return UtilityPaymentListResponse(
        items=[UtilityPaymentResponse.model_validate(p) for p in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/statistics", response_model=LedgerStatisticsResponse)
def payment_statistics(
    payment_type: PaymentType = Query(...),
    department_id: Optional[int] = Query(None),
    start: Optional[date] = Query(None, description="Начало периода (включительно)"),
    end: Optional[date] = Query(None, description="Конец периода (включительно)"),
    db: Session = Depends(get_db),
):
    """Помесячные расходы и потребление."""
    buckets = UtilityPaymentService(db).statistics(
        payment_type=payment_type,
        department_id=department_id,
        start=start,
        end=end,
    )
    return LedgerStatisticsResponse.from_buckets(buckets)


@router.get("/latest/{department_id}/{payment_type}", response_model=LatestUtilityReadingResponse)
def latest_reading(
    department_id: int,
    payment_type: PaymentType,
    before_month: Optional[date] = Query(None, description="Искать платежи до этого месяца"),
    db: Session = Depends(get_db),
):
    """Последние показания для подстановки в новый платёж."""
    payment = UtilityPaymentService(db).get_latest_prior_reading(
        department_id, payment_type, before_month=before_month
    )
    if payment is None:
        return LatestUtilityReadingResponse(found=False)
    return LatestUtilityReadingResponse(
        found=True,
        previous_value=payment.previous_value,
        current_value=payment.current_value,
        previous_value_night=payment.previous_value_night,
        current_value_night=payment.current_value_night,
        price_per_unit=payment.price_per_unit,
        price_per_unit_night=payment.price_per_unit_night,
        payment_month=payment.payment_month,
        created_at=payment.created_at,
    )


@router.get("/{payment_id}", response_model=UtilityPaymentResponse)
def get_payment(payment_id: int, db: Session = Depends(get_db)):
    payment = UtilityPaymentService(db).get(payment_id)
    return UtilityPaymentResponse.model_validate(payment)


@router.post("", response_model=UtilityPaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(data: UtilityPaymentCreate, db: Session = Depends(get_db)):
    """Создать платёж; сумма рассчитывается по показаниям, если не передана."""
    payment = UtilityPaymentService(db).create(data)
    return UtilityPaymentResponse.model_validate(payment)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment(payment_id: int, db: Session = Depends(get_db)):
    UtilityPaymentService(db).delete(payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
