import logging
from typing import Any, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from .config import settings
from .errors import StorageError

logger = logging.getLogger(__name__)


def make_engine(url: str, echo: bool = False) -> Engine:
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live as long as their single connection.
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(url, echo=echo, pool_pre_ping=True)


class Storage:
    """Shared handle to the todo database.

    Every call checks a connection out of the engine's pool for its own
    session and returns it afterwards, so one instance is safe to share
    between request threads.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def query(self, statement) -> List[Any]:
        try:
            with Session(self.engine) as session:
                return list(session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise StorageError(_describe(exc)) from exc

    def query_row(self, statement) -> Optional[Any]:
        try:
            with Session(self.engine) as session:
                return session.exec(statement).first()
        except SQLAlchemyError as exc:
            raise StorageError(_describe(exc)) from exc

    def exec(self, statement) -> int:
        try:
            with self.engine.begin() as conn:
                return conn.execute(statement).rowcount
        except SQLAlchemyError as exc:
            raise StorageError(_describe(exc)) from exc

    def ping(self) -> None:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StorageError(_describe(exc)) from exc


def _describe(exc: SQLAlchemyError) -> str:
    # Prefer the driver's message over SQLAlchemy's wrapper text.
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


engine = make_engine(settings.sqlalchemy_url, echo=settings.sql_echo)
storage = Storage(engine)


def init_db(handle: Optional[Storage] = None) -> None:
    handle = handle or storage
    # IMPORTANT: Import models so metadata contains tables
    import app.models  # noqa: F401
    try:
        SQLModel.metadata.create_all(handle.engine)
        handle.ping()
    except SQLAlchemyError as exc:
        logger.critical("database unavailable at %s: %s", handle.engine.url, _describe(exc))
        raise StorageError(_describe(exc)) from exc
    except StorageError as exc:
        logger.critical("database unavailable at %s: %s", handle.engine.url, exc.message)
        raise
    logger.info("Connected to %s", handle.engine.url)


def get_storage() -> Storage:
    return storage
