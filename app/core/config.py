"""
Конфигурация приложения.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    """Читает булеву переменную окружения (1/true/yes/on)."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _database_url() -> str:
    """URL базы данных; postgres:// приводится к драйверу psycopg2."""
    url = os.getenv("DATABASE_URL", "")
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)
    return url


class Settings:
    """Настройки приложения."""

    # Database: без дефолта, приложение не запустится без БД
    DATABASE_URL: str = _database_url()

    # FastAPI
    APP_TITLE: str = "Employee Manager"
    DEBUG: bool = _env_bool("DEBUG", False)

    # CORS: по умолчанию пустой (ничего не разрешено)
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Создание служебных записей (Reserve / Unemployed / Intern) при старте
    ENSURE_SENTINELS_ON_STARTUP: bool = _env_bool("ENSURE_SENTINELS_ON_STARTUP", True)


settings = Settings()
