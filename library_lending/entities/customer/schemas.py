"""Request schemas for customers."""

from pydantic import BaseModel, EmailStr, Field, SecretStr, field_validator

from library_lending.entities._validators import require_phone, require_text


class CustomerCreate(BaseModel):
    """Payload for registering a customer; ``password`` is the raw secret."""

    name: str = Field(description="Customer's name")
    email: EmailStr = Field(description="Customer's email address")
    address: str | None = Field(default=None, description="Postal address")
    phone_number: str | None = Field(default=None, description="Phone number")
    password: SecretStr = Field(description="Raw password, hashed before storage")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        return require_text(value, "Name")

    @field_validator("phone_number")
    @classmethod
    def _phone_matches_pattern(cls, value: str | None) -> str | None:
        return require_phone(value)


class CustomerUpdate(CustomerCreate):
    """Full replacement of a customer's fields; the password is re-hashed."""
