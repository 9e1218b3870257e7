"""Database engine and transaction scopes."""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from .models import Base

def _engine_options(database_url: str) -> Dict[str, Any]:
    if database_url.startswith('sqlite'):
        return {}
    return {'pool_pre_ping': True}

class SessionManager:
    """Owns the engine and hands out one session per transaction.

    ``with manager as session:`` commits when the block succeeds and rolls
    back when it raises; the session is closed either way. Scopes may nest,
    each with its own session.
    """

    def __init__(self, database_url: str, engine: Optional[Engine] = None):
        """Initialize from a database URL, or wrap an existing engine."""
        self.database_url = database_url
        self.engine = engine if engine is not None else create_engine(
            database_url, **_engine_options(database_url)
        )
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        self.logger = logging.getLogger(__name__)
        self._open: List[Session] = []

    def get_session(self) -> Session:
        """Return a new session the caller must close."""
        return self.SessionLocal()

    def create_schema(self) -> None:
        """Create all tables that do not exist yet."""
        self.logger.debug(f"Creating {len(Base.metadata.tables)} tables if missing")
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        """Close all pooled connections."""
        self.engine.dispose()

    def __enter__(self) -> Session:
        session = self.get_session()
        self._open.append(session)
        return session

    def __exit__(self, exc_type, exc_val, exc_tb):
        session = self._open.pop()
        try:
            if exc_type is None:
                session.commit()
            else:
                self.logger.debug(f"Rolling back after {exc_type.__name__}")
                session.rollback()
        finally:
            session.close()
