"""Unit tests for the deletion cascade bus and its handlers."""

import pytest
from sqlmodel import Session

from library_lending.core.services import AuthorService, CustomerService
from library_lending.core.services.cascade import (
    AuthorDeleted,
    BookDeleted,
    CascadeBus,
    CustomerDeleted,
    build_cascade_bus,
    delete_records_for_book,
    delete_records_for_customer,
    detach_author_from_books,
)
from library_lending.entities.author import Author, AuthorRepository
from library_lending.entities.book import BookRepository
from library_lending.entities.borrowing_record import BorrowingRecordRepository
from library_lending.entities.customer import Customer, CustomerRepository


class TestCascadeBus:
    """Handlers run synchronously, in registration order."""

    def test_default_wiring(self):
        bus = build_cascade_bus()

        assert bus.handlers_for(AuthorDeleted) == [detach_author_from_books]
        assert bus.handlers_for(BookDeleted) == [delete_records_for_book]
        assert bus.handlers_for(CustomerDeleted) == [delete_records_for_customer]

    def test_publish_runs_handlers_in_order(self, session: Session):
        calls = []
        bus = CascadeBus()
        bus.register(AuthorDeleted, lambda event, s: calls.append(("first", event.author.id)))
        bus.register(AuthorDeleted, lambda event, s: calls.append(("second", event.author.id)))
        bus.register(BookDeleted, lambda event, s: calls.append(("book", None)))

        bus.publish(AuthorDeleted(Author(id=7, name="Someone")), session)

        assert calls == [("first", 7), ("second", 7)]

    def test_event_without_handlers(self, session: Session):
        CascadeBus().publish(CustomerDeleted(Customer(id=1, name="N", email="n@example.com")), session)

    def test_handler_error_stops_later_handlers(self, session: Session):
        calls = []
        bus = CascadeBus()

        def _boom(event, s):
            raise RuntimeError("handler failed")

        bus.register(AuthorDeleted, _boom)
        bus.register(AuthorDeleted, lambda event, s: calls.append("after"))

        with pytest.raises(RuntimeError, match="handler failed"):
            bus.publish(AuthorDeleted(Author(id=1, name="X")), session)
        assert calls == []


class TestCascadeScenarios:
    def test_author_deletion_detaches_books(
        self, author_service: AuthorService, session: Session, author_factory, book_factory
    ):
        """Author 5 with books 10 and 11: both books lose their author."""
        author_factory(id=5)
        book_factory(id=10, author_id=5)
        book_factory(id=11, author_id=5)

        assert author_service.delete_author(5) is True

        books = BookRepository(session)
        assert books.get(10).author is None
        assert books.get(11).author is None
        assert AuthorRepository(session).get(5) is None

    def test_second_author_deletion_reports_missing(
        self, author_service: AuthorService, author_factory
    ):
        author = author_factory()

        assert author_service.delete_author(author.id) is True
        assert author_service.delete_author(author.id) is False

    def test_customer_deletion_removes_records(
        self, customer_service: CustomerService, session: Session, customer_factory, book_factory, record_factory
    ):
        """Customer 2 with records 100 and 101: all three rows are gone."""
        customer_factory(id=2)
        first = book_factory()
        second = book_factory()
        record_factory(2, first.id, id=100)
        record_factory(2, second.id, id=101)

        assert customer_service.delete_customer(2) is True

        records = BorrowingRecordRepository(session)
        assert not records.exists(100)
        assert not records.exists(101)
        assert CustomerRepository(session).get(2) is None

    def test_other_customers_records_survive(
        self, customer_service: CustomerService, session: Session, customer_factory, book_factory, record_factory
    ):
        leaving = customer_factory()
        staying = customer_factory()
        book = book_factory()
        record_factory(leaving.id, book.id)
        kept = record_factory(staying.id, book.id)

        customer_service.delete_customer(leaving.id)

        assert [r.id for r in BorrowingRecordRepository(session).list_all()] == [kept.id]

    def test_failing_handler_rolls_back_everything(
        self, session: Session, customer_factory, book_factory, record_factory
    ):
        """Neither the handler writes nor the customer deletion are kept."""
        customer = customer_factory()
        book = book_factory()
        record = record_factory(customer.id, book.id)

        def _fail(event, s):
            raise RuntimeError("cleanup failed")

        bus = build_cascade_bus()
        bus.register(CustomerDeleted, _fail)
        service = CustomerService(session, bus)

        with pytest.raises(RuntimeError, match="cleanup failed"):
            service.delete_customer(customer.id)

        assert CustomerRepository(session).get(customer.id) is not None
        assert BorrowingRecordRepository(session).exists(record.id)
