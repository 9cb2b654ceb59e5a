"""
Конфигурация базы данных SQLAlchemy 2.0.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from app.core.config import settings


_engine_kwargs: dict = {"echo": settings.DEBUG}

if settings.DATABASE_URL.startswith("postgresql"):
    _engine_kwargs.update(
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=3600,
    )
elif settings.DATABASE_URL.startswith("sqlite"):
    _engine_kwargs.update(connect_args={"check_same_thread": False})

engine = create_engine(settings.DATABASE_URL, **_engine_kwargs)

if engine.dialect.name == "sqlite":
    # SQLite не проверяет внешние ключи без этой прагмы
    @event.listens_for(engine, "connect")
    def _enable_sqlite_fk(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    """Базовый класс для всех моделей."""
    pass


def get_db():
    """Генератор сессий для FastAPI dependency injection."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
