"""Streak and stats rules over a list of tickets."""

from datetime import date, timedelta
from typing import Iterable, List

from catharsis.models.schema_models import StatsSchema, TicketSchema


def compute_streak(dates: Iterable[str], today: str) -> int:
    """Count consecutive completed days ending today, or yesterday as a grace day.

    Args:
        dates (Iterable[str]): YYYY-MM-DD dates that have a ticket
        today (str): The current date in YYYY-MM-DD form

    Returns:
        int: Length of the current streak, 0 if neither today nor yesterday has a ticket
    """
    completed = set(dates)
    today_date = date.fromisoformat(today)
    yesterday_date = today_date - timedelta(days=1)

    if today_date.isoformat() in completed:
        check_date = today_date
    elif yesterday_date.isoformat() in completed:
        check_date = yesterday_date
    else:
        return 0

    streak = 0
    # A streak can never be longer than the number of distinct dates.
    for _ in range(len(completed)):
        if check_date.isoformat() not in completed:
            break
        streak += 1
        check_date -= timedelta(days=1)
    return streak


def compute_stats(tickets: List[TicketSchema], today: str) -> StatsSchema:
    """Build the stats projection. `tickets` is expected newest first and is returned as is."""
    return StatsSchema(
        total_tickets=len(tickets),
        streak=compute_streak((ticket.date for ticket in tickets), today),
        history=list(tickets),
    )
