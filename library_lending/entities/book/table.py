"""Book database table model."""

from datetime import date
from typing import Optional

from sqlmodel import Field, Relationship

from library_lending.entities._base import EntityTable
from library_lending.entities.author.table import AuthorTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    ``available`` is the only contended column: it is flipped with
    conditional updates by the availability module, never by field copy.
    """

    __tablename__ = "books"

    title: str = Field(index=True)
    author_id: int | None = Field(default=None, foreign_key="authors.id", index=True)
    isbn: str | None = Field(default=None, index=True)
    publication_date: date | None = None
    genre: str | None = None
    available: bool = Field(default=True)

    author: Optional[AuthorTable] = Relationship()
