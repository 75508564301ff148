"""Synchronous deletion cascade bus.

Deleting an author, a book or a customer publishes an event carrying the
entity about to be removed. Every handler registered for that event type runs
in registration order, inside the caller's session, before the row itself is
deleted. A handler exception propagates straight to the caller; the
remaining handlers are skipped and the caller's transaction rolls back.
"""

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger
from sqlmodel import Session

from library_lending.entities.author import Author
from library_lending.entities.book import Book
from library_lending.entities.customer import Customer


@dataclass(frozen=True)
class AuthorDeleted:
    author: Author


@dataclass(frozen=True)
class BookDeleted:
    book: Book


@dataclass(frozen=True)
class CustomerDeleted:
    customer: Customer


CascadeEvent = AuthorDeleted | BookDeleted | CustomerDeleted
CascadeHandler = Callable[[CascadeEvent, Session], None]


class CascadeBus:
    def __init__(self) -> None:
        self._handlers: dict[type, list[CascadeHandler]] = defaultdict(list)

    def register(self, event_type: type, handler: CascadeHandler) -> None:
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: type) -> list[CascadeHandler]:
        return list(self._handlers.get(event_type, ()))

    def publish(self, event: CascadeEvent, session: Session) -> None:
        for handler in self.handlers_for(type(event)):
            handler(event, session)
            logger.info(
                "Cascade handler {} ran for {}",
                getattr(handler, "__name__", repr(handler)),
                type(event).__name__,
            )
