import logging
import threading
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_store_engine(database_url: str) -> Engine:
    """Build the engine; in-memory SQLite needs one shared connection."""
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url)


class EntityStore:
    """
    Owns every domain record for the lifetime of the process.

    One instance is built by the application factory and handed to request
    handlers and the chat relay. All sessions share a single re-entrant lock,
    so a unit of work opened with ``session()`` is never interleaved with
    another one, whichever thread runs it.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = create_store_engine(database_url)
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False
        )
        self._lock = threading.RLock()

    def create_all(self) -> None:
        # Registers the mappers on Base.metadata
        from studyhub.models import base  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Entity store ready (%s)", self.engine.url.render_as_string(hide_password=True))

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        with self._lock:
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()
