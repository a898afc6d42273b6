"""Database base configuration"""
import logging

from sqlalchemy import create_engine, event, make_url
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from todo_api.infrastructure.config.settings import Settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, pool_size: int = 10, max_overflow: int = 20) -> Engine:
    """Create database engine with appropriate connect_args

    PostgreSQL gets a sized connection pool; SQLite gets
    ``check_same_thread=False`` and, for ``:memory:`` URLs, a single shared
    connection so every session sees the same database.
    """
    if database_url.startswith("sqlite"):
        logger.info("Using SQLite database: %s", database_url)
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    logger.info(
        "Connecting to database: %s",
        make_url(database_url).render_as_string(hide_password=True),
    )
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=pool_size,
        max_overflow=max_overflow,
    )


def create_engine_from_settings(settings: Settings) -> Engine:
    """Create database engine from application settings"""
    return create_db_engine(
        settings.get_database_url(),
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create session factory

    Repositories commit their own transactions.
    """
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Initialize database - create all tables."""
    from todo_api.infrastructure.database import models  # noqa: F401  Import models to register them

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
