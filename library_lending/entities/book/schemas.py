"""Request schemas for books."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from library_lending.entities._validators import require_past_or_present, require_text
from library_lending.entities.author.schemas import AuthorCreate


class _BookFields(BaseModel):
    title: str = Field(description="Title")
    isbn: str | None = Field(default=None, description="ISBN")
    publication_date: date | None = Field(default=None, description="Publication date")
    genre: str | None = Field(default=None, description="Genre")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        return require_text(value, "Title")

    @field_validator("publication_date")
    @classmethod
    def _published_already(cls, value: date | None) -> date | None:
        return require_past_or_present(value, "Publication date")


class BookCreate(_BookFields):
    """Payload for creating a book.

    The author is given by value; an existing author with the same name is
    reused, otherwise a new one is created.
    """

    author: AuthorCreate | None = Field(default=None, description="Author by value")
    available: bool = Field(default=True, description="Initial availability")


class BookUpdate(_BookFields):
    """Full replacement of a book's catalogue fields; availability is not writable."""

    author_id: int | None = Field(default=None, description="Author reference")
