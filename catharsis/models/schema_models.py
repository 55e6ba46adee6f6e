from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime, timezone


class TicketSchema(BaseModel):
    id: int
    date: str
    word: str
    content: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @field_validator("created_at")
    @classmethod
    def as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """SQLite drops the offset; stored values are always UTC."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    class Config:
        from_attributes = True
        populate_by_name = True


class DailyTaskSchema(BaseModel):
    word: str
    is_completed: bool = Field(alias="isCompleted")

    class Config:
        populate_by_name = True


class StatsSchema(BaseModel):
    total_tickets: int = Field(alias="totalTickets")
    streak: int
    history: List[TicketSchema]

    class Config:
        populate_by_name = True


class CompletedSchema(BaseModel):
    success: bool = True
    id: int


class ResetSchema(BaseModel):
    success: bool = True
    deleted: int
