"""
Database session management.

The engine is a process-scoped resource created on first use. Concurrent
cold-start requests wait on a single lock so only one connection attempt is
made; a failed attempt leaves nothing cached and the next caller retries.
"""
import logging
import threading
from typing import Iterator, Optional
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from weddingsite.core.config import settings
from weddingsite.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Lazily connected database handle."""

    def __init__(self, url: str, **engine_options):
        self.url = url
        self.engine_options = engine_options
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def get_engine(self) -> Engine:
        """Return the engine, connecting on first use."""
        if self._engine is not None:
            return self._engine

        with self._lock:
            if self._engine is None:
                engine = create_engine(self.url, **self.engine_options)
                try:
                    with engine.connect() as connection:
                        connection.execute(text("SELECT 1"))
                except SQLAlchemyError:
                    engine.dispose()
                    logger.error("Database connection failed, will retry on next request", exc_info=True)
                    raise
                self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
                self._engine = engine
                logger.info("Database connection established")
        return self._engine

    def session(self) -> Session:
        """Open a new ORM session."""
        self.get_engine()
        return self._session_factory()

    def dispose(self):
        """Close pooled connections and forget the engine."""
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
            self._engine = None
            self._session_factory = None


def _engine_options(url: str) -> dict:
    options = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_recycle"] = 3600
    return options


database = Database(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))


def get_db() -> Iterator[Session]:
    """Dependency for getting database session."""
    db = database.session()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables."""
    import weddingsite.models  # noqa: F401 - registers models on Base.metadata
    Base.metadata.create_all(bind=database.get_engine())
