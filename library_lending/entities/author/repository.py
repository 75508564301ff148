"""Author repository for data access operations."""

from pydantic import BaseModel
from sqlmodel import Session, col, select

from library_lending.entities.author.entity import Author
from library_lending.entities.author.table import AuthorTable


class AuthorRepository:
    """Data-access layer for authors.

    Writes are flushed, never committed; the calling service owns the
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, author_id: int) -> Author | None:
        row = self.get_row(author_id)
        if row is None:
            return None
        return Author.model_validate(row)

    def get_row(self, author_id: int) -> AuthorTable | None:
        return self._session.get(AuthorTable, author_id)

    def exists(self, author_id: int) -> bool:
        return self.get_row(author_id) is not None

    def list_all(self) -> list[Author]:
        rows = self._session.exec(select(AuthorTable).order_by(AuthorTable.id)).all()
        return [Author.model_validate(row) for row in rows]

    def search_by_name(self, fragment: str) -> list[Author]:
        statement = (
            select(AuthorTable)
            .where(col(AuthorTable.name).contains(fragment))
            .order_by(AuthorTable.id)
        )
        return [Author.model_validate(row) for row in self._session.exec(statement).all()]

    def create(self, author: Author | BaseModel) -> Author:
        row = AuthorTable.model_validate(author, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Author.model_validate(row)

    def update(self, author_id: int, changes: BaseModel) -> Author | None:
        row = self.get_row(author_id)
        if row is None:
            return None
        row.name = changes.name
        row.birth_date = changes.birth_date
        row.nationality = changes.nationality
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Author.model_validate(row)

    def delete(self, author_id: int) -> bool:
        row = self.get_row(author_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
