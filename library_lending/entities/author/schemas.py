"""Request schemas for authors."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from library_lending.entities._validators import require_past, require_text


class AuthorCreate(BaseModel):
    """Payload for creating or replacing an author."""

    name: str = Field(description="Author's full name")
    birth_date: date | None = Field(default=None, description="Date of birth")
    nationality: str | None = Field(default=None, description="Nationality")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        return require_text(value, "Name")

    @field_validator("birth_date")
    @classmethod
    def _birth_date_in_past(cls, value: date | None) -> date | None:
        return require_past(value, "Birthdate")


class AuthorUpdate(AuthorCreate):
    """Full replacement of an author's fields."""
