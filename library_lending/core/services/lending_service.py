"""Borrowing-record lifecycle and the rules that guard it."""

from datetime import date

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from library_lending.core.errors import (
    BookAlreadyBorrowedError,
    BookNotBorrowedError,
    BookNotFoundError,
    CustomerNotFoundError,
    DuplicateBorrowingRecordError,
    ReturnDateInFutureError,
)
from library_lending.core.services import availability
from library_lending.core.services.database.db_session import transaction
from library_lending.entities.book import BookRepository
from library_lending.entities.borrowing_record import (
    BorrowingRecord,
    BorrowingRecordCreate,
    BorrowingRecordRepository,
    BorrowingRecordUpdate,
)
from library_lending.entities.customer import CustomerRepository


class LendingService:
    """Creates, updates, returns and deletes borrowing records.

    Every mutating call is one unit of work on the injected session: either
    all of its writes are committed or none are.
    """

    def __init__(self, db_session: Session):
        self._session = db_session
        self._records = BorrowingRecordRepository(db_session)
        self._books = BookRepository(db_session)
        self._customers = CustomerRepository(db_session)

    def list_borrowing_records(self) -> list[BorrowingRecord]:
        return self._records.list_all()

    def get_borrowing_record(self, record_id: int) -> BorrowingRecord | None:
        return self._records.get(record_id)

    def search_by_customer(self, customer_id: int) -> list[BorrowingRecord]:
        return self._records.list_by_customer(customer_id)

    def search_by_book(self, book_id: int) -> list[BorrowingRecord]:
        return self._records.list_by_book(book_id)

    def create_borrowing_record(self, data: BorrowingRecordCreate) -> BorrowingRecord:
        """Lend a book to a customer.

        Checks run in a fixed order: customer exists, book exists, book is
        available, no record exists for the same customer, book and borrow
        date. The book is then claimed and the record inserted in the same
        transaction.

        Raises:
            CustomerNotFoundError: unknown ``customer_id``.
            BookNotFoundError: unknown ``book_id``.
            BookAlreadyBorrowedError: the book is on loan, including when a
                concurrent borrow claimed it first.
            DuplicateBorrowingRecordError: the triple is already recorded.
        """
        with transaction(self._session):
            if not self._customers.exists(data.customer_id):
                logger.warning("Borrow refused: customer {} does not exist", data.customer_id)
                raise CustomerNotFoundError(data.customer_id)
            book = self._books.get(data.book_id)
            if book is None:
                logger.warning("Borrow refused: book {} does not exist", data.book_id)
                raise BookNotFoundError(data.book_id)
            if not book.available:
                logger.warning("Borrow refused: book {} is already borrowed", data.book_id)
                raise BookAlreadyBorrowedError(data.book_id)
            if self._records.find_by_triple(data.customer_id, data.book_id, data.borrow_date):
                logger.warning(
                    "Borrow refused: duplicate record for customer {} book {} on {}",
                    data.customer_id,
                    data.book_id,
                    data.borrow_date,
                )
                raise DuplicateBorrowingRecordError(
                    data.customer_id, data.book_id, data.borrow_date
                )

            availability.claim_book(self._session, data.book_id)
            try:
                record = self._records.create(data)
            except IntegrityError as e:
                raise DuplicateBorrowingRecordError(
                    data.customer_id, data.book_id, data.borrow_date
                ) from e

        logger.info(
            "Borrowing record {} created: customer {} took book {}",
            record.id,
            record.customer_id,
            record.book_id,
        )
        return record

    def update_borrowing_record(
        self, record_id: int, data: BorrowingRecordUpdate
    ) -> BorrowingRecord | None:
        """Overwrite a record's customer, book and dates.

        Availability is not re-checked here. The referenced customer and book
        must exist, and a collision on the unique triple is reported as
        :class:`DuplicateBorrowingRecordError`.

        Raises:
            CustomerNotFoundError: ``data.customer_id`` is unknown.
            BookNotFoundError: ``data.book_id`` is unknown.
        """
        with transaction(self._session):
            if not self._records.exists(record_id):
                return None
            if not self._customers.exists(data.customer_id):
                raise CustomerNotFoundError(data.customer_id)
            if not self._books.exists(data.book_id):
                raise BookNotFoundError(data.book_id)
            try:
                record = self._records.update(record_id, data)
            except IntegrityError as e:
                raise DuplicateBorrowingRecordError(
                    data.customer_id, data.book_id, data.borrow_date
                ) from e
        logger.info("Borrowing record {} updated", record_id)
        return record

    def delete_borrowing_record(self, record_id: int) -> bool:
        """Remove a finished record.

        Returns ``False`` for an unknown id. The book's availability is left
        untouched; use :meth:`return_book` to release it.

        Raises:
            ReturnDateInFutureError: the loan has not ended yet.
        """
        with transaction(self._session):
            record = self._records.get(record_id)
            if record is None:
                return False
            if record.is_open():
                logger.warning(
                    "Refusing to delete borrowing record {}: return date {} is in the future",
                    record_id,
                    record.return_date,
                )
                raise ReturnDateInFutureError(record_id, record.return_date)
            self._records.delete(record_id)
        logger.info("Borrowing record {} deleted", record_id)
        return True

    def return_book(self, record_id: int) -> BorrowingRecord | None:
        """Close a loan and make its book available again.

        Only the book's current loan can be returned, and only once. A return
        date still in the future is moved to today.

        Raises:
            BookNotBorrowedError: the record is already returned, a later loan
                holds the book, or the book is already available.
        """
        with transaction(self._session):
            row = self._records.get_row(record_id)
            if row is None:
                return None
            current = self._records.current_loan_row(row.book_id)
            if row.returned_on is not None or current is None or current.id != row.id:
                logger.warning(
                    "Refusing to return record {}: it is not the current loan of book {}",
                    record_id,
                    row.book_id,
                )
                raise BookNotBorrowedError(row.book_id)
            availability.release_book(self._session, row.book_id)
            today = date.today()
            if row.return_date > today:
                row.return_date = today
            row.returned_on = today
            record = self._records.save(row)
        logger.info("Book {} returned on record {}", record.book_id, record_id)
        return record
