from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from library_lending.core.services import (
    AuthorService,
    BookService,
    CascadeBus,
    CustomerService,
    LendingService,
    build_cascade_bus,
)
from library_lending.core.services.database import enable_sqlite_foreign_keys

__all__ = [
    "author_service",
    "book_service",
    "cascade_bus",
    "customer_service",
    "engine",
    "lending_service",
    "session",
]


@pytest.fixture
def engine() -> Generator[Engine]:
    """A fresh in-memory database per test, foreign keys enforced."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    # Registers every table on the metadata
    import library_lending.entities  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()


@pytest.fixture
def cascade_bus() -> CascadeBus:
    return build_cascade_bus()


@pytest.fixture
def lending_service(session: Session) -> LendingService:
    return LendingService(session)


@pytest.fixture
def author_service(session: Session, cascade_bus: CascadeBus) -> AuthorService:
    return AuthorService(session, cascade_bus)


@pytest.fixture
def book_service(session: Session, cascade_bus: CascadeBus) -> BookService:
    return BookService(session, cascade_bus)


@pytest.fixture
def customer_service(session: Session, cascade_bus: CascadeBus) -> CustomerService:
    return CustomerService(session, cascade_bus)
