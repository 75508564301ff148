"""Book catalogue operations."""

from loguru import logger
from sqlmodel import Session

from library_lending.core.errors import InvalidArgumentError
from library_lending.core.services import availability
from library_lending.core.services.cascade import BookDeleted, CascadeBus
from library_lending.core.services.database.db_session import transaction
from library_lending.entities.author import Author, AuthorCreate, AuthorRepository, same_author
from library_lending.entities.book import Book, BookCreate, BookRepository, BookUpdate


class BookService:
    def __init__(self, db_session: Session, cascade_bus: CascadeBus):
        self._session = db_session
        self._books = BookRepository(db_session)
        self._authors = AuthorRepository(db_session)
        self._bus = cascade_bus

    def list_books(self) -> list[Book]:
        return self._books.list_all()

    def get_book(self, book_id: int) -> Book | None:
        return self._books.get(book_id)

    def search_by_title(self, title: str) -> list[Book]:
        return self._books.search_by_title(title)

    def search_by_author_name(self, name: str) -> list[Book]:
        return self._books.search_by_author_name(name)

    def search_by_isbn(self, isbn: str) -> list[Book]:
        return self._books.search_by_isbn(isbn)

    def create_book(self, data: BookCreate) -> Book:
        """Add a book, reusing or creating its author by name."""
        with transaction(self._session):
            author_id = None
            if data.author is not None:
                author_id = self._resolve_author(data.author).id
            book = self._books.create(data, author_id=author_id, available=data.available)
        logger.info("Book {} created", book.id)
        return book

    def update_book(self, book_id: int, data: BookUpdate) -> Book | None:
        """Replace catalogue fields; the availability flag is not touched."""
        with transaction(self._session):
            if data.author_id is not None and not self._authors.exists(data.author_id):
                raise InvalidArgumentError(f"Author {data.author_id} does not exist")
            book = self._books.update(book_id, data)
        return book

    def delete_book(self, book_id: int) -> bool:
        """Delete an available book together with its borrowing records.

        Raises:
            BookCurrentlyBorrowedError: the book is on loan.
        """
        with transaction(self._session):
            book = self._books.get(book_id)
            if book is None:
                return False
            availability.ensure_deletable(book)
            self._bus.publish(BookDeleted(book), self._session)
            self._books.delete(book_id)
        logger.info("Book {} deleted", book_id)
        return True

    def _resolve_author(self, wanted: AuthorCreate) -> Author:
        candidate = Author.model_validate(wanted.model_dump())
        for existing in self._authors.search_by_name(wanted.name):
            if same_author(existing, candidate):
                return existing
        logger.info("Creating author '{}' for new book", wanted.name)
        return self._authors.create(wanted)
