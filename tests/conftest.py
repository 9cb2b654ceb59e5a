"""
Тестовая инфраструктура: фикстуры для SQLite in-memory и FastAPI TestClient.
"""
import os

# Должно быть ДО импорта app: настройки читаются при импорте
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENSURE_SENTINELS_ON_STARTUP"] = "false"

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.core.database import Base, get_db
from app.main import app as fastapi_app
from app.seeds.sentinels import seed_sentinels
from app.seeds.specializations import seed_specializations

# Импортируем все модели чтобы Base.metadata знал о них
import app.models  # noqa: F401


# SQLite in-memory с StaticPool: одна БД для всех connections
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Включаем поддержку FK в SQLite
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(bind=engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Создаёт все таблицы перед каждым тестом и удаляет после."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session() -> Session:
    """Фикстура тестовой сессии БД."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db_session: Session) -> Session:
    """Сессия со служебными записями и специализациями по умолчанию."""
    seed_sentinels(db_session)
    seed_specializations(db_session)
    return db_session


def _client_for(session: Session):
    # Как get_db: commit после успешного запроса, rollback при ошибке
    def override_get_db():
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise

    fastapi_app.dependency_overrides[get_db] = override_get_db
    return TestClient(fastapi_app, raise_server_exceptions=False)


@pytest.fixture
def client(db_session: Session) -> TestClient:
    """FastAPI TestClient с подменённой БД (без служебных записей)."""
    with _client_for(db_session) as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(seeded_db: Session) -> TestClient:
    """FastAPI TestClient со служебными записями и специализациями."""
    with _client_for(seeded_db) as c:
        yield c
    fastapi_app.dependency_overrides.clear()


# --- Вспомогательные функции для создания тестовых данных ---

def create_department(c: TestClient, name: str = "Alpha") -> dict:
    """Создаёт подразделение через API."""
    resp = c.post("/api/v1/departments", json={"name": name})
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_position(c: TestClient, title: str = "Engineer", department_ids: list[int] = None) -> dict:
    """Создаёт должность через API."""
    resp = c.post(
        "/api/v1/positions",
        json={"title": title, "department_ids": department_ids or []},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_employee(
    c: TestClient,
    call_sign: str = "Falcon",
    department_id: int = None,
    position_id: int = None,
    specialization_id: int = None,
    **extra,
) -> dict:
    """Создаёт сотрудника через API."""
    data = {"call_sign": call_sign, **extra}
    if department_id is not None:
        data["department_id"] = department_id
    if position_id is not None:
        data["position_id"] = position_id
    if specialization_id is not None:
        data["specialization_id"] = specialization_id
    resp = c.post("/api/v1/employees", json=data)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_category(c: TestClient, name: str = "Tools") -> dict:
    resp = c.post("/api/v1/equipment-categories", json={"name": name})
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_equipment(
    c: TestClient,
    category_id: int,
    name: str = "Generator",
    department_id: int = None,
    **extra,
) -> dict:
    """Создаёт оборудование через API."""
    data = {
        "name": name,
        "purchase_date": "2024-01-15",
        "category_id": category_id,
        **extra,
    }
    if department_id is not None:
        data["department_id"] = department_id
    resp = c.post("/api/v1/equipment", json=data)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_utility_payment(
    c: TestClient,
    department_id: int,
    payment_month: str = "2024-01-01",
    previous_value: float = 100,
    current_value: float = 150,
    price_per_unit: float = 2,
    payment_type: str = "Electricity",
    **extra,
) -> dict:
    """Создаёт коммунальный платёж через API (сумма считается сервером)."""
    data = {
        "department_id": department_id,
        "payment_type": payment_type,
        "previous_value": previous_value,
        "current_value": current_value,
        "price_per_unit": price_per_unit,
        "payment_month": payment_month,
        **extra,
    }
    resp = c.post("/api/v1/utility-payments", json=data)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_fuel_expense(
    c: TestClient,
    department_id: int,
    previous_mileage: float = 1000,
    current_mileage: float = 1050,
    price_per_liter: float = 50,
    fuel_type: str = "Diesel",
    entry_date: str = "2024-03-10T08:00:00",
    **extra,
) -> dict:
    """Создаёт запись пробега через API."""
    data = {
        "department_id": department_id,
        "fuel_type": fuel_type,
        "entry_date": entry_date,
        "previous_mileage": previous_mileage,
        "current_mileage": current_mileage,
        "price_per_liter": price_per_liter,
        **extra,
    }
    resp = c.post("/api/v1/fuel/expenses", json=data)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_fuel_income(
    c: TestClient,
    department_id: int,
    amount: float = 40,
    fuel_type: str = "Diesel",
    transaction_date: str = "2024-03-01T09:00:00",
) -> dict:
    resp = c.post(
        "/api/v1/fuel/incomes",
        json={
            "department_id": department_id,
            "fuel_type": fuel_type,
            "amount": amount,
            "transaction_date": transaction_date,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_schedule_entry(
    c: TestClient,
    employee_id: int,
    department_id: int,
    start_time: str = "2024-03-10T08:00:00",
    end_time: str = "2024-03-10T20:00:00",
    state: str = "OnWork",
) -> dict:
    """Создаёт запись графика через API."""
    resp = c.post(
        "/api/v1/schedule",
        json={
            "employee_id": employee_id,
            "department_id": department_id,
            "start_time": start_time,
            "end_time": end_time,
            "state": state,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
