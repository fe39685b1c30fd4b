"""Initialize database tables."""
import logging

from sqlmodel import SQLModel

from app.models.user import User  # noqa: F401  registers the table
from app.models.todo import Todo  # noqa: F401  registers the table
from app.db.config import engine

logger = logging.getLogger(__name__)


def init_db(bind=None):
    """Create all tables in the database (no-op for existing tables)."""
    logger.info("Creating database tables")
    SQLModel.metadata.create_all(bind or engine)


if __name__ == "__main__":
    init_db()
    print("Database tables created successfully.")
