"""Customer database table model."""

from sqlmodel import Field

from library_lending.entities._base import EntityTable


class CustomerTable(EntityTable, table=True):
    """Database persistence model for customers.

    Only the salted password hash is stored.
    """

    __tablename__ = "customers"

    name: str
    email: str = Field(unique=True, index=True)
    address: str | None = None
    phone_number: str | None = None
    password_hash: str
