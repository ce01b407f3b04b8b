# app/database.py

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# sqlite connections are shared across the threadpool
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

# engine
engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,  # drop stale connections
    connect_args=connect_args,
)

# session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# declarative base
Base = declarative_base()


# request-scoped session dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create all tables"""
    # registers the mapped tables on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("database tables ready")
