"""Entity: Book."""

from datetime import date

from pydantic import Field

from library_lending.entities._base import Entity
from library_lending.entities.author.entity import Author


class Book(Entity):
    """Book entity representing a title held by the library."""

    title: str = Field(description="Title")
    author: Author | None = Field(default=None, description="Author, if known")
    isbn: str | None = Field(default=None, description="ISBN")
    publication_date: date | None = Field(default=None, description="Publication date")
    genre: str | None = Field(default=None, description="Genre")
    available: bool = Field(default=True, description="Whether the book can be borrowed")
