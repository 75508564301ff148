"""Database initialization script."""

from library_lending.core.services.database.db_session import DbSessionService
from library_lending.runtime.seed import seed


def init_db(with_seed: bool = False, db_service: DbSessionService | None = None) -> None:
    """Create all database tables, optionally loading the demo data."""
    db_service = db_service or DbSessionService()
    db_service.create_all()
    if with_seed:
        with db_service.session_scope() as session:
            seed(session)


if __name__ == "__main__":
    init_db()
