"""Database engine, session factory and unit-of-work helper."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, SQLModel, create_engine

import library_lending.entities  # noqa: F401  registers tables on SQLModel.metadata
from library_lending.core.errors import OperationFailedError
from library_lending.runtime.config.config_data import ConfigData
from library_lending.runtime.context import get_config


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores foreign keys unless asked on every connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Run one unit of work on ``session``.

    Commits when the block exits cleanly. Any exception rolls the whole unit
    back and propagates; ``OperationalError`` from the driver is re-raised as
    :class:`OperationFailedError`.
    """
    try:
        yield session
        session.commit()
    except OperationalError as e:
        session.rollback()
        logger.error(
            "Database transaction failed",
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise OperationFailedError(f"The store could not complete the operation: {e.orig}") from e
    except Exception as e:
        session.rollback()
        logger.debug("Transaction rolled back after {}", type(e).__name__)
        raise


class DbSessionService:
    def __init__(self, config: ConfigData | None = None, engine: Engine | None = None):
        """Initialize the shared database engine and session factory.

        An existing ``engine`` may be injected, which the tests use to share
        one in-memory SQLite database.
        """
        main_config = config or get_config()
        db_config = main_config.database

        if engine is not None:
            self._engine = engine
            return

        logger.info("Configuring database engine for environment: {}", main_config.app.environment)
        engine_kwargs: dict = {
            "echo": db_config.echo,
            "pool_pre_ping": True,
            "connect_args": self._get_connect_args(main_config),
        }
        if not db_config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                }
            )

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        if db_config.is_sqlite:
            enable_sqlite_foreign_keys(self._engine)

        if main_config.app.environment == "production":
            logger.info(
                "Database engine initialized",
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_recycle=db_config.pool_recycle,
            )

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_connect_args(self, config: ConfigData) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if "postgresql" in config.database.url:
            connect_args.update(
                {
                    "application_name": f"{config.app.environment}_library_lending",
                    "connect_timeout": 30,
                }
            )

        elif config.database.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # sync endpoints run in a threadpool
                    "timeout": 20,  # lock timeout
                }
            )

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for concurrent lending."
                )

        return connect_args

    def create_all(self) -> None:
        """Create every missing table."""
        logger.info("Creating database tables")
        SQLModel.metadata.create_all(self._engine)

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False, autoflush=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Open a session, run one unit of work on it and close it."""
        db = self.get_session()
        try:
            with transaction(db):
                yield db
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except OperationalError as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False
