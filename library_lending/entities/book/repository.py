"""Book repository for data access operations."""

from pydantic import BaseModel
from sqlalchemy import update
from sqlmodel import Session, col, select

from library_lending.entities.author.table import AuthorTable
from library_lending.entities.book.entity import Book
from library_lending.entities.book.table import BookTable

_CATALOGUE_FIELDS = {"title", "isbn", "publication_date", "genre"}


class BookRepository:
    """Data-access layer for books.

    Writes are flushed, never committed; the calling service owns the
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, book_id: int) -> Book | None:
        row = self.get_row(book_id)
        if row is None:
            return None
        return Book.model_validate(row)

    def get_row(self, book_id: int) -> BookTable | None:
        return self._session.get(BookTable, book_id)

    def exists(self, book_id: int) -> bool:
        return self.get_row(book_id) is not None

    def list_all(self) -> list[Book]:
        return self._to_entities(select(BookTable).order_by(BookTable.id))

    def search_by_title(self, fragment: str) -> list[Book]:
        return self._to_entities(
            select(BookTable)
            .where(col(BookTable.title).contains(fragment))
            .order_by(BookTable.id)
        )

    def search_by_isbn(self, fragment: str) -> list[Book]:
        return self._to_entities(
            select(BookTable)
            .where(col(BookTable.isbn).contains(fragment))
            .order_by(BookTable.id)
        )

    def search_by_author_name(self, fragment: str) -> list[Book]:
        return self._to_entities(
            select(BookTable)
            .join(AuthorTable, col(BookTable.author_id) == col(AuthorTable.id))
            .where(col(AuthorTable.name).contains(fragment))
            .order_by(BookTable.id)
        )

    def rows_by_author(self, author_id: int) -> list[BookTable]:
        statement = select(BookTable).where(BookTable.author_id == author_id)
        return list(self._session.exec(statement).all())

    def create(
        self, book: BaseModel, author_id: int | None = None, available: bool = True
    ) -> Book:
        fields = book.model_dump(include=_CATALOGUE_FIELDS | {"id"})
        row = BookTable(**fields, author_id=author_id, available=available)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row)

    def update(self, book_id: int, changes: BaseModel) -> Book | None:
        row = self.get_row(book_id)
        if row is None:
            return None
        for field, value in changes.model_dump(include=_CATALOGUE_FIELDS).items():
            setattr(row, field, value)
        row.author_id = changes.author_id
        return self.save(row)

    def save(self, row: BookTable) -> Book:
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row)

    def delete(self, book_id: int) -> bool:
        row = self.get_row(book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def set_available_if(self, book_id: int, expected: bool, value: bool) -> bool:
        """Compare-and-set the availability flag.

        Returns ``False`` when the flag did not hold ``expected``, i.e. another
        transaction changed it first.
        """
        self._session.flush()
        statement = (
            update(BookTable)
            .where(col(BookTable.id) == book_id, col(BookTable.available) == expected)
            .values(available=value)
        )
        result = self._session.connection().execute(statement)
        row = self.get_row(book_id)
        if row is not None:
            self._session.refresh(row)
        return result.rowcount == 1

    def _to_entities(self, statement) -> list[Book]:
        return [Book.model_validate(row) for row in self._session.exec(statement).all()]
