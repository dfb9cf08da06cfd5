"""SQLAlchemy models for the Event Service."""

from sqlalchemy import Column, DateTime, Integer, String

from .database import Base


class Event(Base):
    """A scheduled event (talk, workshop, conference session...)."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255))
    place = Column(String(255))
    speaker = Column(String(255))
    event_type = Column(String(100))
    date_time = Column(DateTime)

    # Fields a client may set; id is assigned by the database only
    MUTABLE_FIELDS = ("title", "event_type", "place", "speaker", "date_time")

    def __repr__(self):
        return f"<Event(id={self.id}, title='{self.title}', date_time={self.date_time})>"
