"""Book API router with CRUD and search operations."""

from fastapi import APIRouter, Depends, HTTPException, status

from library_lending.api.http.deps import get_book_service
from library_lending.core.services import BookService
from library_lending.entities.book import Book, BookCreate, BookUpdate

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[Book])
def list_books(service: BookService = Depends(get_book_service)) -> list[Book]:
    """List all books."""
    return service.list_books()


@router.get("/search", response_model=list[Book])
def search_books(
    title: str | None = None,
    author: str | None = None,
    isbn: str | None = None,
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    """Search by exactly one of ``title``, ``author`` or ``isbn``."""
    given = [value is not None for value in (title, author, isbn)]
    if sum(given) != 1:
        raise HTTPException(
            status_code=400, detail="Provide exactly one of title, author or isbn"
        )
    if title is not None:
        return service.search_by_title(title)
    if author is not None:
        return service.search_by_author_name(author)
    return service.search_by_isbn(isbn)


@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, service: BookService = Depends(get_book_service)) -> Book:
    book = service.get_book(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(book: BookCreate, service: BookService = Depends(get_book_service)) -> Book:
    return service.create_book(book)


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: int, book: BookUpdate, service: BookService = Depends(get_book_service)
) -> Book:
    updated = service.update_book(book_id, book)
    if updated is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return updated


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, service: BookService = Depends(get_book_service)) -> None:
    """Delete an available book and its borrowing history."""
    if not service.delete_book(book_id):
        raise HTTPException(status_code=404, detail="Book not found")
