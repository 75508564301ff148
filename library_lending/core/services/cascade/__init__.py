from .bus import AuthorDeleted, BookDeleted, CascadeBus, CascadeEvent, CascadeHandler, CustomerDeleted
from .handlers import (
    build_cascade_bus,
    delete_records_for_book,
    delete_records_for_customer,
    detach_author_from_books,
)

__all__ = [
    "AuthorDeleted",
    "BookDeleted",
    "CascadeBus",
    "CascadeEvent",
    "CascadeHandler",
    "CustomerDeleted",
    "build_cascade_bus",
    "delete_records_for_book",
    "delete_records_for_customer",
    "detach_author_from_books",
]
