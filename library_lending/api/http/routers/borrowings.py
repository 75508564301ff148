"""Borrowing record API router."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from library_lending.api.http.deps import get_lending_service
from library_lending.core.services import LendingService
from library_lending.entities.borrowing_record import (
    BorrowingRecord,
    BorrowingRecordCreate,
    BorrowingRecordUpdate,
)

router = APIRouter(prefix="/borrowings", tags=["borrowings"])


@router.get("", response_model=list[BorrowingRecord])
def list_borrowing_records(
    service: LendingService = Depends(get_lending_service),
) -> list[BorrowingRecord]:
    return service.list_borrowing_records()


@router.get("/search", response_model=list[BorrowingRecord])
def search_borrowing_records(
    user_id: int | None = Query(default=None, alias="userId"),
    book_id: int | None = Query(default=None, alias="bookId"),
    service: LendingService = Depends(get_lending_service),
) -> list[BorrowingRecord]:
    """Records of one customer (``userId``) or of one book (``bookId``)."""
    if (user_id is None) == (book_id is None):
        raise HTTPException(status_code=400, detail="Provide exactly one of userId or bookId")
    if user_id is not None:
        return service.search_by_customer(user_id)
    return service.search_by_book(book_id)


@router.get("/{record_id}", response_model=BorrowingRecord)
def get_borrowing_record(
    record_id: int, service: LendingService = Depends(get_lending_service)
) -> BorrowingRecord:
    record = service.get_borrowing_record(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Borrowing record not found")
    return record


@router.post("", response_model=BorrowingRecord, status_code=status.HTTP_201_CREATED)
def create_borrowing_record(
    record: BorrowingRecordCreate, service: LendingService = Depends(get_lending_service)
) -> BorrowingRecord:
    """Lend a book. The book becomes unavailable until it is returned."""
    return service.create_borrowing_record(record)


@router.put("/{record_id}", response_model=BorrowingRecord)
def update_borrowing_record(
    record_id: int,
    record: BorrowingRecordUpdate,
    service: LendingService = Depends(get_lending_service),
) -> BorrowingRecord:
    updated = service.update_borrowing_record(record_id, record)
    if updated is None:
        raise HTTPException(status_code=404, detail="Borrowing record not found")
    return updated


@router.post("/{record_id}/return", response_model=BorrowingRecord)
def return_book(
    record_id: int, service: LendingService = Depends(get_lending_service)
) -> BorrowingRecord:
    """Close the loan and make the book available again."""
    record = service.return_book(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Borrowing record not found")
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_borrowing_record(
    record_id: int, service: LendingService = Depends(get_lending_service)
) -> None:
    """Delete a finished record. Availability of the book is not changed."""
    if not service.delete_borrowing_record(record_id):
        raise HTTPException(status_code=404, detail="Borrowing record not found")
