from . import authors, books, borrowings, customers, health

__all__ = ["authors", "books", "borrowings", "customers", "health"]
