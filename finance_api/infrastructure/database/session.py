"""Database session management with connection pooling"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from finance_api.config import settings
from finance_api.infrastructure.database.models import Base

connect_args = {}
pool_options = {
    "pool_pre_ping": True,  # Verify connections before using
    "pool_recycle": 3600,
}
if settings.database_url.startswith("sqlite"):
    connect_args = {"check_same_thread": False}
else:
    # Connection pool: max 20 connections
    pool_options.update(pool_size=10, max_overflow=10)

engine = create_engine(settings.database_url, connect_args=connect_args, **pool_options)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create missing tables"""
    Base.metadata.create_all(bind=engine)


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
