from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from entitykit.config import Settings, get_settings

Base = declarative_base()


def build_engine(settings: Optional[Settings] = None) -> Engine:
    """
    Create the SQLAlchemy engine for the configured store.

    SQLite connections get WAL mode, a busy timeout and foreign keys;
    other backends get a larger pool with pre-ping.
    """
    settings = settings or get_settings()
    url = settings.database_url

    if url.startswith('sqlite'):
        engine = create_engine(
            url,
            connect_args={'check_same_thread': False},
            echo=settings.sql_echo,
        )

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        url,
        echo=settings.sql_echo,
        pool_size=20,
        max_overflow=30,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=3600  # Recycle connections after 1 hour to prevent stale connections
    )


engine = build_engine()
SessionLocal = sessionmaker(bind=engine)


def init_database(bind: Optional[Engine] = None) -> None:
    """Create tables for every entity registered on Base."""
    Base.metadata.create_all(bind or engine)


def get_db() -> Iterator[Session]:
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
