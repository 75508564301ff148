"""Entity: Customer."""

from pydantic import Field

from library_lending.entities._base import Entity


class Customer(Entity):
    """Library customer. The password hash never leaves the repository."""

    name: str = Field(description="Customer's name")
    email: str = Field(description="Customer's email address")
    address: str | None = Field(default=None, description="Postal address")
    phone_number: str | None = Field(default=None, description="Phone number")
