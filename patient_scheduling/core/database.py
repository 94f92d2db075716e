from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Optional
import logging

from .config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()

# Largest value an Integer id column holds
MAX_ID = 2**31 - 1

class Database:
    """Storage handle owned by one application instance.

    The engine (and its connection pool) is created by ``open()`` when the
    application starts and released by ``close()`` at shutdown. Request code
    never touches the engine directly; it asks for a session through the
    ``get_db`` dependency.
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 5,
        max_overflow: int = 0,
        pool_timeout: int = 30,
        pool_recycle: int = 1800,
    ):
        self.url = url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.get_database_url,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def kind(self) -> str:
        if self.url.startswith("postgresql"):
            return "PostgreSQL"
        if self.is_sqlite:
            return "SQLite"
        return "Unknown"

    def open(self):
        """Create the engine and session factory."""
        if self.engine is not None:
            return

        if self.is_sqlite:
            # SQLite sessions are used from FastAPI's worker threads
            self.engine = create_engine(
                self.url, connect_args={"check_same_thread": False}
            )
        else:
            self.engine = create_engine(
                self.url,
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_timeout=self.pool_timeout,
                pool_recycle=self.pool_recycle,
                pool_pre_ping=True,
            )

        self._session_factory = sessionmaker(autoflush=False, bind=self.engine)
        logger.info(f"Opened {self.kind} database engine")

    def close(self):
        """Dispose of the engine and every pooled connection."""
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database is not open")
        return self._session_factory()

    def init_db(self):
        """Initialize database tables."""
        from .. import models  # noqa: F401  registers tables on Base.metadata

        if self.engine is None:
            raise RuntimeError("Database is not open")
        Base.metadata.create_all(bind=self.engine)
