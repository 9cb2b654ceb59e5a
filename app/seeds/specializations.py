"""
Сид специализаций по умолчанию.
"""
from sqlalchemy.orm import Session

from app.models.specialization import Specialization


DEFAULT_SPECIALIZATIONS = [
    "General",
    "IT",
    "HR",
    "Finance",
    "Operations",
    "Management",
]


def seed_specializations(db: Session):
    """Заполняет таблицу специализаций."""
    for name in DEFAULT_SPECIALIZATIONS:
        exists = db.query(Specialization).filter_by(name=name).first()
        if not exists:
            db.add(Specialization(name=name))
    db.commit()
