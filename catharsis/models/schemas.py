from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column
from sqlalchemy.types import Integer, String, DateTime, TEXT
from datetime import datetime, timezone


class Base(DeclarativeBase):
    pass


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Ticket(Base):
    __tablename__ = "tickets"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    date = Column(String(10), unique=True, nullable=False)  # YYYY-MM-DD
    word = Column(String, nullable=False)
    content = Column(TEXT, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), default=utc_now)
