"""
API endpoints для учёта топлива.
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.fuel import FuelType
from app.schemas.fuel import (
    FuelExpenseCreate,
    FuelExpenseResponse,
    FuelExpenseListResponse,
    FuelIncomeCreate,
    FuelIncomeResponse,
    FuelIncomeListResponse,
    LatestFuelReadingResponse,
    FuelBalanceItem,
    FuelBalanceResponse,
)
from app.schemas.ledger import LedgerStatisticsResponse
from app.services.department_service import DepartmentService
from app.services.fuel_service import FuelService
from app.services.ledger import CalendarUnit

router = APIRouter(prefix="/fuel", tags=["fuel"])


# ---- Расходы ----

@router.get("/expenses", response_model=FuelExpenseListResponse)
def list_expenses(
    department_id: Optional[int] = Query(None),
    fuel_type: Optional[FuelType] = Query(None),
    equipment_id: Optional[int] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    items, total = FuelService(db).get_expenses(
        department_id=department_id,
        fuel_type=fuel_type,
        equipment_id=equipment_id,
        skip=skip,
        limit=limit,
    )
    return FuelExpenseListResponse(
        items=[FuelExpenseResponse.model_validate(e) for e in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get(
    "/expenses/latest/{department_id}/{fuel_type}",
    response_model=LatestFuelReadingResponse,
)
def latest_expense(
    department_id: int,
    fuel_type: FuelType,
    equipment_id: Optional[int] = Query(None, description="Только по конкретной технике"),
    db: Session = Depends(get_db),
):
    """Последний пробег для подстановки в новую запись."""
    expense = FuelService(db).get_latest_prior_reading(department_id, fuel_type, equipment_id=equipment_id)
    if expense is None:
        return LatestFuelReadingResponse(found=False)
    return LatestFuelReadingResponse(
        found=True,
        previous_mileage=expense.previous_mileage,
        current_mileage=expense.current_mileage,
        price_per_liter=expense.price_per_liter,
        entry_date=expense.entry_date,
        created_at=expense.created_at,
    )


@router.get("/expenses/{expense_id}", response_model=FuelExpenseResponse)
def get_expense(expense_id: int, db: Session = Depends(get_db)):
    expense = FuelService(db).get_expense(expense_id)
    return FuelExpenseResponse.model_validate(expense)


@router.post("/expenses", response_model=FuelExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_expense(data: FuelExpenseCreate, db: Session = Depends(get_db)):
    """Записать пробег."""
    expense = FuelService(db).create_expense(data)
    return FuelExpenseResponse.model_validate(expense)


@router.delete("/expenses/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(expense_id: int, db: Session = Depends(get_db)):
    FuelService(db).delete_expense(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---- Поступления ----

@router.get("/incomes", response_model=FuelIncomeListResponse)
def list_incomes(
    department_id: Optional[int] = Query(None),
    fuel_type: Optional[FuelType] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    items, total = FuelService(db).get_incomes(
        department_id=department_id,
        fuel_type=fuel_type,
        skip=skip,
        limit=limit,
    )
    return FuelIncomeListResponse(
        items=[FuelIncomeResponse.model_validate(i) for i in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.post("/incomes", response_model=FuelIncomeResponse, status_code=status.HTTP_201_CREATED)
def create_income(data: FuelIncomeCreate, db: Session = Depends(get_db)):
    """Зарегистрировать поступление топлива."""
    income = FuelService(db).create_income(data)
    return FuelIncomeResponse.model_validate(income)


@router.delete("/incomes/{income_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_income(income_id: int, db: Session = Depends(get_db)):
    FuelService(db).delete_income(income_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---- Статистика и остатки ----

@router.get("/statistics", response_model=LedgerStatisticsResponse)
def fuel_statistics(
    department_id: Optional[int] = Query(None),
    fuel_type: Optional[FuelType] = Query(None),
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    unit: CalendarUnit = Query(CalendarUnit.DAY, description="day или month"),
    db: Session = Depends(get_db),
):
    """Расходы и пробег по дням или месяцам."""
    buckets = FuelService(db).statistics(
        department_id=department_id,
        fuel_type=fuel_type,
        start=start,
        end=end,
        unit=unit,
    )
    return LedgerStatisticsResponse.from_buckets(buckets)


@router.get("/balance/{department_id}", response_model=FuelBalanceResponse)
def fuel_balance(
    department_id: int,
    fuel_type: Optional[FuelType] = Query(None),
    db: Session = Depends(get_db),
):
    """Остаток топлива подразделения: поступления минус пробег."""
    DepartmentService(db).get(department_id)
    service = FuelService(db)
    if fuel_type is not None:
        balances = {fuel_type: service.compute_balance(department_id, fuel_type)}
    else:
        balances = service.balances(department_id)
    return FuelBalanceResponse(
        department_id=department_id,
        balances=[FuelBalanceItem(fuel_type=t, balance=b) for t, b in balances.items()],
    )
