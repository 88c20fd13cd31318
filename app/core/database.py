"""Database engine, session factory and declarative base."""
import logging
import re

from sqlalchemy import create_engine, text
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def mask_url(url: str) -> str:
    """Mask the password in a database URL for logging."""
    return re.sub(r"://([^:/]+):([^@]+)@", r"://\1:***@", url)


class Base(DeclarativeBase):
    """Declarative base shared by all models."""
    pass


def build_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL)
logger.info("Database configured: %s", mask_url(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """FastAPI dependency yielding a session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connection() -> bool:
    """Return True when the database answers a trivial query."""
    try:
        with engine.connect() as conn:
            row = conn.execute(text("SELECT 1")).fetchone()
            return bool(row and row[0] == 1)
    except Exception as e:
        logger.warning("Database connection check failed: %s", e)
        return False
