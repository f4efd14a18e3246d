"""
SQLAlchemy ORM models for database tables.

YAGNI: Start minimal, add tables only when needed.
"""
from sqlalchemy import Column, String, DateTime, Integer, Index
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class WebinarModel(Base):
    """
    Webinars table - one row per webinar, keyed by webinar id.

    organizer_id references a user but carries no foreign key: users are
    owned by the upstream identity source.
    """
    __tablename__ = "webinars"

    id = Column(String(100), primary_key=True)
    organizer_id = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    seats = Column(Integer, nullable=False)

    __table_args__ = (
        Index('idx_webinars_organizer_id', 'organizer_id'),
    )
