"""Domain errors raised by the lending and catalogue services.

Plain id misses are reported as ``None``/``False`` results by the services;
the classes here cover the failures a caller has to be told about. The HTTP
layer maps each family to a status code.
"""


class LibraryError(Exception):
    """Base class for every domain error."""

    code = "library_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LibraryError):
    code = "not_found"


class CustomerNotFoundError(NotFoundError):
    code = "customer_not_found"

    def __init__(self, customer_id: int):
        super().__init__(f"Customer {customer_id} does not exist")
        self.customer_id = customer_id


class BookNotFoundError(NotFoundError):
    code = "book_not_found"

    def __init__(self, book_id: int):
        super().__init__(f"Book {book_id} does not exist")
        self.book_id = book_id


class ConflictError(LibraryError):
    """A domain rule refused the operation."""

    code = "conflict"


class BookAlreadyBorrowedError(ConflictError):
    code = "book_already_borrowed"

    def __init__(self, book_id: int):
        super().__init__(f"Book {book_id} is already borrowed")
        self.book_id = book_id


class DuplicateBorrowingRecordError(ConflictError):
    code = "duplicate_borrowing_record"

    def __init__(self, customer_id: int, book_id: int, borrow_date):
        super().__init__(
            "Borrowing record with the same customer, book, and borrow date already exists "
            f"(customer={customer_id}, book={book_id}, borrow_date={borrow_date})"
        )
        self.customer_id = customer_id
        self.book_id = book_id
        self.borrow_date = borrow_date


class BookCurrentlyBorrowedError(ConflictError):
    code = "book_currently_borrowed"

    def __init__(self, book_id: int):
        super().__init__(f"Book {book_id} is currently borrowed and cannot be deleted")
        self.book_id = book_id


class ReturnDateInFutureError(ConflictError):
    code = "return_date_in_future"

    def __init__(self, record_id: int, return_date):
        super().__init__(
            f"The return date of borrowing record {record_id} ({return_date}) is still in the future, "
            "and the record cannot be deleted"
        )
        self.record_id = record_id
        self.return_date = return_date


class BookNotBorrowedError(ConflictError):
    code = "book_not_borrowed"

    def __init__(self, book_id: int):
        super().__init__(f"Book {book_id} is not currently borrowed")
        self.book_id = book_id


class InvalidArgumentError(LibraryError):
    code = "invalid_argument"


class DuplicateEmailError(InvalidArgumentError):
    code = "duplicate_email"

    def __init__(self, email: str):
        super().__init__(f"Email must be unique: {email} is already registered")
        self.email = email


class OperationFailedError(LibraryError):
    """The store could not complete the unit of work (timeout, lost connection)."""

    code = "operation_failed"
