"""Unit tests for the book availability state machine."""

import pytest
from sqlmodel import Session

from library_lending.core.errors import (
    BookAlreadyBorrowedError,
    BookCurrentlyBorrowedError,
    BookNotBorrowedError,
)
from library_lending.core.services.availability import (
    BookState,
    claim_book,
    ensure_deletable,
    release_book,
    state_of,
)
from library_lending.entities.book import Book, BookRepository


class TestBookState:
    def test_state_follows_flag(self):
        assert state_of(Book(title="Dune", available=True)) is BookState.AVAILABLE
        assert state_of(Book(title="Dune", available=False)) is BookState.BORROWED

    def test_borrowed_book_is_not_deletable(self):
        with pytest.raises(BookCurrentlyBorrowedError):
            ensure_deletable(Book(id=3, title="Dune", available=False))

    def test_available_book_is_deletable(self):
        ensure_deletable(Book(id=3, title="Dune", available=True))


class TestTransitions:
    """Claims and releases are conditional updates on the flag."""

    def test_only_first_of_two_claims_succeeds(self, session: Session, book_factory):
        book = book_factory()

        claim_book(session, book.id)
        with pytest.raises(BookAlreadyBorrowedError):
            claim_book(session, book.id)

        assert BookRepository(session).get(book.id).available is False

    def test_release_after_claim(self, session: Session, book_factory):
        book = book_factory()
        claim_book(session, book.id)

        release_book(session, book.id)

        assert BookRepository(session).get(book.id).available is True

    def test_release_of_available_book_fails(self, session: Session, book_factory):
        book = book_factory()
        with pytest.raises(BookNotBorrowedError):
            release_book(session, book.id)

    def test_claim_of_missing_book_fails(self, session: Session):
        with pytest.raises(BookAlreadyBorrowedError):
            claim_book(session, 404)
