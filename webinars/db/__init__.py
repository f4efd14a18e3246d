"""Database package - all database-related code."""
from webinars.db.connection import init_db, get_db_session, close_db
from webinars.db.models import Base, WebinarModel

__all__ = [
    "init_db",
    "get_db_session",
    "close_db",
    "Base",
    "WebinarModel",
]
