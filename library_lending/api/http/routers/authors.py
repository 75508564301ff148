"""Author API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, status

from library_lending.api.http.deps import get_author_service
from library_lending.core.services import AuthorService
from library_lending.entities.author import Author, AuthorCreate, AuthorUpdate

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("", response_model=list[Author])
def list_authors(service: AuthorService = Depends(get_author_service)) -> list[Author]:
    """List all authors."""
    return service.list_authors()


@router.get("/search", response_model=list[Author])
def search_authors(
    name: str, service: AuthorService = Depends(get_author_service)
) -> list[Author]:
    """Authors whose name contains ``name``."""
    return service.search_authors(name)


@router.get("/{author_id}", response_model=Author)
def get_author(author_id: int, service: AuthorService = Depends(get_author_service)) -> Author:
    author = service.get_author(author_id)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return author


@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED)
def create_author(
    author: AuthorCreate, service: AuthorService = Depends(get_author_service)
) -> Author:
    return service.create_author(author)


@router.put("/{author_id}", response_model=Author)
def update_author(
    author_id: int,
    author: AuthorUpdate,
    service: AuthorService = Depends(get_author_service),
) -> Author:
    updated = service.update_author(author_id, author)
    if updated is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return updated


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(author_id: int, service: AuthorService = Depends(get_author_service)) -> None:
    """Delete an author; their books stay, without an author."""
    if not service.delete_author(author_id):
        raise HTTPException(status_code=404, detail="Author not found")
