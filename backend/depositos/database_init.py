# depositos/database_init.py
import logging

from sqlalchemy_utils import database_exists, create_database
from depositos.database import DATABASE_URL, Base, engine

logger = logging.getLogger(__name__)


def ensure_database(url: str = DATABASE_URL):
    if not database_exists(url):
        create_database(url)
        logger.info("Database created: %s", url)
    else:
        logger.info("Database already exists: %s", url)


def create_tables():
    # registers the depositos table on Base.metadata
    from depositos.models import deposito  # noqa: F401

    ensure_database()
    Base.metadata.create_all(bind=engine)
