"""Customer repository for data access operations."""

from sqlmodel import Session, select

from library_lending.entities.customer.entity import Customer
from library_lending.entities.customer.table import CustomerTable


class CustomerRepository:
    """Data-access layer for customers.

    Writes are flushed, never committed; a duplicate email surfaces as
    ``sqlalchemy.exc.IntegrityError`` at flush time.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, customer_id: int) -> Customer | None:
        row = self.get_row(customer_id)
        if row is None:
            return None
        return Customer.model_validate(row)

    def get_row(self, customer_id: int) -> CustomerTable | None:
        return self._session.get(CustomerTable, customer_id)

    def exists(self, customer_id: int) -> bool:
        return self.get_row(customer_id) is not None

    def get_by_email(self, email: str) -> Customer | None:
        row = self._session.exec(
            select(CustomerTable).where(CustomerTable.email == email)
        ).first()
        if row is None:
            return None
        return Customer.model_validate(row)

    def list_all(self) -> list[Customer]:
        rows = self._session.exec(select(CustomerTable).order_by(CustomerTable.id)).all()
        return [Customer.model_validate(row) for row in rows]

    def create(self, customer: Customer, password_hash: str) -> Customer:
        row = CustomerTable(
            **customer.model_dump(include={"id", "name", "email", "address", "phone_number"}),
            password_hash=password_hash,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Customer.model_validate(row)

    def update(
        self, customer_id: int, changes: Customer, password_hash: str
    ) -> Customer | None:
        row = self.get_row(customer_id)
        if row is None:
            return None
        row.name = changes.name
        row.email = changes.email
        row.address = changes.address
        row.phone_number = changes.phone_number
        row.password_hash = password_hash
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Customer.model_validate(row)

    def password_hash(self, customer_id: int) -> str | None:
        row = self.get_row(customer_id)
        return None if row is None else row.password_hash

    def delete(self, customer_id: int) -> bool:
        row = self.get_row(customer_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
