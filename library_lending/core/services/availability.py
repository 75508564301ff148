"""Book availability state machine.

A book is either ``AVAILABLE`` or ``BORROWED``; the state is derived from the
``available`` flag on the books table. The only transitions are
:func:`claim_book` (taken by a new borrowing record) and :func:`release_book`
(the explicit return). Both are conditional updates, so of two concurrent
claims on the same book exactly one wins.
"""

from enum import StrEnum

from loguru import logger
from sqlmodel import Session

from library_lending.core.errors import (
    BookAlreadyBorrowedError,
    BookCurrentlyBorrowedError,
    BookNotBorrowedError,
)
from library_lending.entities.book import Book, BookRepository


class BookState(StrEnum):
    AVAILABLE = "available"
    BORROWED = "borrowed"


def state_of(book: Book) -> BookState:
    return BookState.AVAILABLE if book.available else BookState.BORROWED


def claim_book(session: Session, book_id: int) -> None:
    """Move a book from ``AVAILABLE`` to ``BORROWED``.

    Raises:
        BookAlreadyBorrowedError: the flag was already cleared, possibly by a
            concurrent transaction that won the race.
    """
    if not BookRepository(session).set_available_if(book_id, expected=True, value=False):
        logger.warning("Claim lost for book {}", book_id)
        raise BookAlreadyBorrowedError(book_id)
    logger.info("Book {} claimed", book_id)


def release_book(session: Session, book_id: int) -> None:
    """Move a book from ``BORROWED`` back to ``AVAILABLE``."""
    if not BookRepository(session).set_available_if(book_id, expected=False, value=True):
        logger.warning("Release refused for book {}: not borrowed", book_id)
        raise BookNotBorrowedError(book_id)
    logger.info("Book {} released", book_id)


def ensure_deletable(book: Book) -> None:
    if state_of(book) is BookState.BORROWED:
        logger.warning("Refusing to delete borrowed book {}", book.id)
        raise BookCurrentlyBorrowedError(book.id)
