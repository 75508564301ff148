"""Author catalogue operations."""

from loguru import logger
from sqlmodel import Session

from library_lending.core.services.cascade import AuthorDeleted, CascadeBus
from library_lending.core.services.database.db_session import transaction
from library_lending.entities.author import Author, AuthorCreate, AuthorRepository, AuthorUpdate


class AuthorService:
    def __init__(self, db_session: Session, cascade_bus: CascadeBus):
        self._session = db_session
        self._authors = AuthorRepository(db_session)
        self._bus = cascade_bus

    def list_authors(self) -> list[Author]:
        return self._authors.list_all()

    def get_author(self, author_id: int) -> Author | None:
        return self._authors.get(author_id)

    def search_authors(self, name: str) -> list[Author]:
        return self._authors.search_by_name(name)

    def create_author(self, data: AuthorCreate) -> Author:
        with transaction(self._session):
            author = self._authors.create(data)
        logger.info("Author {} created", author.id)
        return author

    def update_author(self, author_id: int, data: AuthorUpdate) -> Author | None:
        with transaction(self._session):
            author = self._authors.update(author_id, data)
        return author

    def delete_author(self, author_id: int) -> bool:
        """Delete an author after detaching them from their books.

        Returns ``False`` when no author has ``author_id``.
        """
        with transaction(self._session):
            author = self._authors.get(author_id)
            if author is None:
                return False
            self._bus.publish(AuthorDeleted(author), self._session)
            self._authors.delete(author_id)
        logger.info("Author {} deleted", author_id)
        return True
