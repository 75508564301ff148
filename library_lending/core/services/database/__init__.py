from .db_session import DbSessionService, enable_sqlite_foreign_keys, transaction

__all__ = ["DbSessionService", "enable_sqlite_foreign_keys", "transaction"]
