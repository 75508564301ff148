"""Entity package: Author."""

from .entity import Author, same_author
from .repository import AuthorRepository
from .schemas import AuthorCreate, AuthorUpdate
from .table import AuthorTable

__all__ = [
    "Author",
    "AuthorCreate",
    "AuthorRepository",
    "AuthorTable",
    "AuthorUpdate",
    "same_author",
]
