"""
Запуск всех сидов.
"""
import logging

from app.core.database import SessionLocal
from app.seeds.sentinels import seed_sentinels
from app.seeds.specializations import seed_specializations

logger = logging.getLogger(__name__)


def run_all_seeds():
    """Запускает все сиды."""
    db = SessionLocal()
    try:
        seed_sentinels(db)
        seed_specializations(db)
        logger.info("All seeds completed successfully")
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )
    run_all_seeds()
