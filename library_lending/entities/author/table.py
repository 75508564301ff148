"""Author database table model."""

from datetime import date

from sqlmodel import Field

from library_lending.entities._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors.

    This represents how the Author entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "authors"

    name: str = Field(index=True)
    birth_date: date | None = None
    nationality: str | None = None
