"""Entity: Author."""

from datetime import date

from pydantic import Field

from library_lending.entities._base import Entity


class Author(Entity):
    """Author of one or more books.

    Identity is the store id. Two authors with the same name are still
    different entities; use :func:`same_author` where a name match is wanted.
    """

    name: str = Field(description="Author's full name")
    birth_date: date | None = Field(default=None, description="Date of birth")
    nationality: str | None = Field(default=None, description="Nationality")


def same_author(left: Author, right: Author) -> bool:
    """Name-based comparison used to reuse an existing author on book creation."""
    return left.name == right.name
