"""Unit tests for request schema validation."""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from library_lending.entities.author import Author, AuthorCreate, same_author
from library_lending.entities.book import BookCreate
from library_lending.entities.borrowing_record import BorrowingRecord, BorrowingRecordCreate
from library_lending.entities.customer import CustomerCreate

TODAY = date.today()


class TestAuthorCreate:
    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Name is mandatory"):
            AuthorCreate(name="   ")

    def test_birth_date_must_be_past(self):
        with pytest.raises(ValidationError, match="Birthdate must be in the past"):
            AuthorCreate(name="Someone", birth_date=TODAY)

    def test_valid(self):
        author = AuthorCreate(name="Someone", birth_date=TODAY - timedelta(days=1))
        assert author.name == "Someone"


class TestSameAuthor:
    def test_same_name_different_ids(self):
        assert same_author(Author(id=1, name="Anne Rice"), Author(id=2, name="Anne Rice"))

    def test_case_matters(self):
        assert not same_author(Author(name="Anne Rice"), Author(name="anne rice"))


class TestBookCreate:
    def test_publication_date_may_be_today(self):
        assert BookCreate(title="New", publication_date=TODAY).publication_date == TODAY

    def test_publication_date_in_future_rejected(self):
        with pytest.raises(ValidationError, match="must not be in the future"):
            BookCreate(title="Soon", publication_date=TODAY + timedelta(days=1))

    def test_defaults_to_available(self):
        assert BookCreate(title="Any").available is True


class TestCustomerCreate:
    def _fields(self, **overrides):
        fields = {"name": "Jane", "email": "jane@example.com", "password": "pw"}
        fields.update(overrides)
        return fields

    @pytest.mark.parametrize("phone", ["01012345678", "01112345678", "01212345678", "01512345678"])
    def test_valid_phone_numbers(self, phone):
        assert CustomerCreate(**self._fields(phone_number=phone)).phone_number == phone

    @pytest.mark.parametrize("phone", ["01312345678", "0111234567", "021123456789", "0111234567a"])
    def test_invalid_phone_numbers(self, phone):
        with pytest.raises(ValidationError, match="Phone number must start with '01'"):
            CustomerCreate(**self._fields(phone_number=phone))

    @pytest.mark.parametrize(
        "email", ["", "plain", "a@b", "a b@example.com", "@example.com", "jane@@example.com"]
    )
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError, match="valid email address"):
            CustomerCreate(**self._fields(email=email))

    @pytest.mark.parametrize("email", ["jane@example.com", "jane.doe+books@mail.example.org"])
    def test_valid_email(self, email):
        assert CustomerCreate(**self._fields(email=email)).email == email

    def test_password_is_secret(self):
        customer = CustomerCreate(**self._fields())
        assert "pw" not in repr(customer)


class TestBorrowingRecordCreate:
    def test_borrow_date_in_future_rejected(self):
        with pytest.raises(ValidationError, match="Borrow date must not be in the future"):
            BorrowingRecordCreate(
                customer_id=1, book_id=1, borrow_date=TODAY + timedelta(days=1), return_date=TODAY + timedelta(days=2)
            )

    def test_return_date_in_past_rejected(self):
        with pytest.raises(ValidationError, match="Return date must not be in the past"):
            BorrowingRecordCreate(
                customer_id=1, book_id=1, borrow_date=TODAY, return_date=TODAY - timedelta(days=1)
            )

    def test_same_day_loan(self):
        record = BorrowingRecordCreate(customer_id=1, book_id=1, borrow_date=TODAY, return_date=TODAY)
        assert record.return_date == TODAY


class TestBorrowingRecord:
    def test_open_until_return_date(self):
        record = BorrowingRecord(
            customer_id=1, book_id=1, borrow_date=TODAY, return_date=TODAY + timedelta(days=1)
        )
        assert record.is_open()
        assert not record.is_open(today=TODAY + timedelta(days=1))
