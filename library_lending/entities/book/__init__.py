"""Entity package: Book."""

from .entity import Book
from .repository import BookRepository
from .schemas import BookCreate, BookUpdate
from .table import BookTable

__all__ = ["Book", "BookCreate", "BookRepository", "BookTable", "BookUpdate"]
