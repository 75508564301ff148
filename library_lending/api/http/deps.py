"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from library_lending.api.http.app_data import ApplicationDependencies
from library_lending.core.services import (
    AuthorService,
    BookService,
    CascadeBus,
    CustomerService,
    LendingService,
)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Yield one database session per request."""
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_cascade_bus(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> CascadeBus:
    return app_deps.cascade_bus


def get_lending_service(session: Session = Depends(get_session)) -> LendingService:
    return LendingService(session)


def get_author_service(
    session: Session = Depends(get_session),
    bus: CascadeBus = Depends(get_cascade_bus),
) -> AuthorService:
    return AuthorService(session, bus)


def get_book_service(
    session: Session = Depends(get_session),
    bus: CascadeBus = Depends(get_cascade_bus),
) -> BookService:
    return BookService(session, bus)


def get_customer_service(
    session: Session = Depends(get_session),
    bus: CascadeBus = Depends(get_cascade_bus),
) -> CustomerService:
    return CustomerService(session, bus)
