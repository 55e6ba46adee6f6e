"""Use cases behind the HTTP routes and the CLI.

Each function takes the ticket store explicitly and the current date as an
argument, so the clock is read in exactly one place (`today_iso`).
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from catharsis import load_config
from catharsis.domain.daily_word import validate_date_string, word_for_date
from catharsis.domain.streak import compute_stats
from catharsis.exceptions import (
    AlreadyCompletedError,
    ContentTooLongError,
    DuplicateDateError,
    WrongWordError,
)
from catharsis.models.schema_models import DailyTaskSchema, StatsSchema
from catharsis.services.ticket_store import TicketStore


def today_iso(now: Optional[datetime] = None) -> str:
    """Return the UTC calendar date as YYYY-MM-DD."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date().isoformat()


async def get_daily_task(store: TicketStore, today: str) -> DailyTaskSchema:
    word = word_for_date(today)
    is_completed = await store.exists(today)
    return DailyTaskSchema(word=word, is_completed=is_completed)


async def get_stats(store: TicketStore, today: str) -> StatsSchema:
    validate_date_string(today)
    tickets = await store.list_all()
    return compute_stats(tickets, today)


async def complete_day(
    store: TicketStore,
    today: str,
    guessed_word: str,
    content: Optional[str] = None,
    max_content_length: Optional[int] = None,
) -> int:
    """Record today's ticket if the guess matches today's word

    Args:
        store (TicketStore): Where tickets are persisted
        today (str): The current date (YYYY-MM-DD)
        guessed_word (str): The word typed by the user, compared case-insensitively
        content (Optional[str]): Note to keep with the ticket, empty if omitted
        max_content_length (Optional[int]): Limit for `content`, defaults to the configured value

    Raises:
        WrongWordError: The guess is not today's word
        AlreadyCompletedError: A ticket for today already exists
        ContentTooLongError: The note is longer than allowed

    Returns:
        int: Id of the new ticket
    """
    target_word = word_for_date(today)
    if guessed_word.upper() != target_word:
        logging.info(f"Wrong guess for {today}")
        raise WrongWordError(guessed_word)

    if await store.exists(today):
        raise AlreadyCompletedError(today)

    if max_content_length is None:
        max_content_length = load_config.content_max_length
    content = content or ""
    if len(content) > max_content_length:
        raise ContentTooLongError(len(content), max_content_length)

    try:
        return await store.insert(today, target_word, content)
    except DuplicateDateError as e:
        # Another request stored today's ticket after the check above.
        raise AlreadyCompletedError(today) from e


async def reset(store: TicketStore) -> int:
    """Delete every ticket. Callers must have confirmed with the user first."""
    deleted = await store.delete_all()
    logging.warning(f"Reset removed {deleted} tickets")
    return deleted
