"""Default cleanup handlers for the deletion cascade."""

from loguru import logger
from sqlmodel import Session

from library_lending.core.services.cascade.bus import (
    AuthorDeleted,
    BookDeleted,
    CascadeBus,
    CustomerDeleted,
)
from library_lending.entities.book import BookRepository
from library_lending.entities.borrowing_record import BorrowingRecordRepository


def detach_author_from_books(event: AuthorDeleted, session: Session) -> None:
    """Null the author reference of every book the author wrote."""
    repo = BookRepository(session)
    rows = repo.rows_by_author(event.author.id)
    for row in rows:
        row.author_id = None
        repo.save(row)
    logger.debug("Detached author {} from {} book(s)", event.author.id, len(rows))


def delete_records_for_book(event: BookDeleted, session: Session) -> None:
    repo = BorrowingRecordRepository(session)
    count = repo.delete_rows(repo.rows_by_book(event.book.id))
    logger.debug("Deleted {} borrowing record(s) of book {}", count, event.book.id)


def delete_records_for_customer(event: CustomerDeleted, session: Session) -> None:
    repo = BorrowingRecordRepository(session)
    count = repo.delete_rows(repo.rows_by_customer(event.customer.id))
    logger.debug("Deleted {} borrowing record(s) of customer {}", count, event.customer.id)


def build_cascade_bus() -> CascadeBus:
    """Bus wired with the default handlers."""
    bus = CascadeBus()
    bus.register(AuthorDeleted, detach_author_from_books)
    bus.register(BookDeleted, delete_records_for_book)
    bus.register(CustomerDeleted, delete_records_for_customer)
    return bus
