"""Customer registration and maintenance."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from library_lending.core import security
from library_lending.core.errors import DuplicateEmailError
from library_lending.core.services.cascade import CascadeBus, CustomerDeleted
from library_lending.core.services.database.db_session import transaction
from library_lending.entities.customer import (
    Customer,
    CustomerCreate,
    CustomerRepository,
    CustomerUpdate,
)


class CustomerService:
    def __init__(self, db_session: Session, cascade_bus: CascadeBus):
        self._session = db_session
        self._customers = CustomerRepository(db_session)
        self._bus = cascade_bus

    def list_customers(self) -> list[Customer]:
        return self._customers.list_all()

    def get_customer(self, customer_id: int) -> Customer | None:
        return self._customers.get(customer_id)

    def create_customer(self, data: CustomerCreate) -> Customer:
        """Register a customer, storing only a hash of the password.

        Raises:
            DuplicateEmailError: another customer already uses the email.
        """
        customer = Customer.model_validate(data.model_dump(exclude={"password"}))
        password_hash = security.hash_password(data.password.get_secret_value())
        with transaction(self._session):
            try:
                created = self._customers.create(customer, password_hash)
            except IntegrityError as e:
                logger.warning("Customer registration refused: email {} taken", data.email)
                raise DuplicateEmailError(data.email) from e
        logger.info("Customer {} created", created.id)
        return created

    def update_customer(self, customer_id: int, data: CustomerUpdate) -> Customer | None:
        changes = Customer.model_validate(data.model_dump(exclude={"password"}))
        password_hash = security.hash_password(data.password.get_secret_value())
        with transaction(self._session):
            try:
                updated = self._customers.update(customer_id, changes, password_hash)
            except IntegrityError as e:
                logger.warning("Customer {} update refused: email {} taken", customer_id, data.email)
                raise DuplicateEmailError(data.email) from e
        return updated

    def delete_customer(self, customer_id: int) -> bool:
        """Delete a customer and every borrowing record they hold."""
        with transaction(self._session):
            customer = self._customers.get(customer_id)
            if customer is None:
                return False
            self._bus.publish(CustomerDeleted(customer), self._session)
            self._customers.delete(customer_id)
        logger.info("Customer {} deleted", customer_id)
        return True

    def verify_password(self, customer_id: int, password: str) -> bool:
        password_hash = self._customers.password_hash(customer_id)
        if password_hash is None:
            return False
        return security.verify_password(password_hash, password)
