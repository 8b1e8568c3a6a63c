import logging
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from core.config_loader import load_config
from database.models import Base

logger = logging.getLogger(__name__)


@lru_cache()
def get_engine(database_url: str = None) -> Engine:
    """Engine for the configured database, created on first use."""
    url = database_url or load_config().database.url
    return create_engine(url, pool_pre_ping=True)


@lru_cache()
def get_session_factory(database_url: str = None) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine(database_url))


def SessionLocal() -> Session:
    return get_session_factory()()


def init_db(engine: Engine = None) -> None:
    """Create all tables that do not exist yet."""
    engine = engine or get_engine()
    Base.metadata.create_all(engine)
    logger.info("Database tables created")
