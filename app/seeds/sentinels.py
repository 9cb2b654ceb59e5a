"""
Сид служебных записей (Reserve, Unemployed, Intern).
"""
from sqlalchemy.orm import Session

from app.services.sentinel_service import SentinelService


def seed_sentinels(db: Session):
    """Создаёт служебные записи, если их ещё нет."""
    SentinelService(db).ensure_sentinels()
