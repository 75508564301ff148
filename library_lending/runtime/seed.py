"""Demo catalogue: two authors, two books, two customers and one loan each."""

from datetime import date, timedelta

from loguru import logger
from sqlmodel import Session

from library_lending.core.services import (
    BookService,
    CustomerService,
    LendingService,
    build_cascade_bus,
)
from library_lending.entities.author import AuthorCreate
from library_lending.entities.book import BookCreate
from library_lending.entities.borrowing_record import BorrowingRecordCreate
from library_lending.entities.customer import CustomerCreate, CustomerRepository

SEED_BOOKS = [
    BookCreate(
        title="Harry Potter and the Philosopher's Stone",
        author=AuthorCreate(name="J.K. Rowling", birth_date=date(1965, 7, 31), nationality="British"),
        isbn="978-0747532699",
        publication_date=date(1997, 6, 26),
        genre="Fantasy",
    ),
    BookCreate(
        title="A Game of Thrones",
        author=AuthorCreate(
            name="George R.R. Martin", birth_date=date(1948, 9, 20), nationality="American"
        ),
        isbn="978-0553103540",
        publication_date=date(1996, 8, 6),
        genre="Fantasy",
    ),
]

SEED_CUSTOMERS = [
    CustomerCreate(
        name="John Doe",
        email="john.doe@example.com",
        address="123 Main St",
        phone_number="01111234567",
        password="password123",
    ),
    CustomerCreate(
        name="Jane Smith",
        email="jane.smith@example.com",
        address="456 Elm St",
        phone_number="01115000153",
        password="password456",
    ),
]

LOAN_DAYS = 14


def seed(session: Session) -> bool:
    """Load the demo data unless it is already there.

    Each customer borrows the matching book for two weeks from today, so both
    books end up unavailable. Returns ``False`` when nothing was loaded.
    """
    if CustomerRepository(session).get_by_email(SEED_CUSTOMERS[0].email) is not None:
        logger.info("Seed data already present; skipping")
        return False

    bus = build_cascade_bus()
    books = [BookService(session, bus).create_book(data) for data in SEED_BOOKS]
    customers = [CustomerService(session, bus).create_customer(data) for data in SEED_CUSTOMERS]

    lending = LendingService(session)
    today = date.today()
    for customer, book in zip(customers, books, strict=True):
        lending.create_borrowing_record(
            BorrowingRecordCreate(
                customer_id=customer.id,
                book_id=book.id,
                borrow_date=today,
                return_date=today + timedelta(days=LOAN_DAYS),
            )
        )

    logger.info(
        "Seeded {} books, {} customers and {} borrowing records",
        len(books),
        len(customers),
        len(customers),
    )
    return True
