"""Webinar repositories: SQLAlchemy-backed and in-memory."""
from webinars.repositories.webinar_repository import WebinarRepository
from webinars.repositories.in_memory_webinar_repository import InMemoryWebinarRepository

__all__ = ["WebinarRepository", "InMemoryWebinarRepository"]
