from datetime import datetime, timedelta, timezone

import pytest

from catharsis.exceptions import AlreadyCompletedError, ContentTooLongError, WrongWordError
from catharsis.services import daily_task


async def test_daily_task_reports_completion(store):
    task = await daily_task.get_daily_task(store, "2024-03-03")
    assert task.word == "VIBRANT"
    assert not task.is_completed

    await daily_task.complete_day(store, "2024-03-03", "VIBRANT")
    task = await daily_task.get_daily_task(store, "2024-03-03")
    assert task.is_completed


async def test_lowercase_guess_is_stored_uppercase(store):
    ticket_id = await daily_task.complete_day(store, "2024-03-03", "vibrant", "felt good")
    tickets = await store.list_all()
    assert tickets[0].id == ticket_id
    assert tickets[0].word == "VIBRANT"
    assert tickets[0].content == "felt good"


async def test_wrong_word(store):
    with pytest.raises(WrongWordError):
        await daily_task.complete_day(store, "2024-03-03", "ZENITH")
    assert await store.list_all() == []


async def test_second_completion_same_day(store):
    await daily_task.complete_day(store, "2024-03-03", "VIBRANT")
    with pytest.raises(AlreadyCompletedError):
        await daily_task.complete_day(store, "2024-03-03", "vibrant")


async def test_missing_content_is_empty_string(store):
    await daily_task.complete_day(store, "2024-03-03", "VIBRANT", None)
    tickets = await store.list_all()
    assert tickets[0].content == ""


async def test_content_limit(store):
    await daily_task.complete_day(store, "2024-03-02", "ZENITH", "x" * 10, max_content_length=10)
    with pytest.raises(ContentTooLongError):
        await daily_task.complete_day(store, "2024-03-03", "VIBRANT", "x" * 11, max_content_length=10)
    assert not await store.exists("2024-03-03")


async def test_stats_and_reset(store):
    for date, word in [("2024-03-01", "EPHEMERAL"), ("2024-03-02", "ZENITH"), ("2024-03-03", "VIBRANT")]:
        await daily_task.complete_day(store, date, word)

    stats = await daily_task.get_stats(store, "2024-03-03")
    assert stats.total_tickets == 3 == len(await store.list_all())
    assert stats.streak == 3
    assert (await daily_task.get_stats(store, "2024-03-04")).streak == 3
    assert (await daily_task.get_stats(store, "2024-03-05")).streak == 0

    assert await daily_task.reset(store) == 3
    stats = await daily_task.get_stats(store, "2024-03-03")
    assert stats.model_dump(by_alias=True) == {"totalTickets": 0, "streak": 0, "history": []}


def test_today_iso_uses_utc():
    tokyo = timezone(timedelta(hours=9))
    assert daily_task.today_iso(datetime(2024, 3, 4, 8, 0, tzinfo=tokyo)) == "2024-03-03"
    assert daily_task.today_iso(datetime(2024, 3, 3, 23, 59)) == "2024-03-03"
    assert len(daily_task.today_iso()) == 10


async def test_completed_day_wins_over_content_limit(store):
    await daily_task.complete_day(store, "2024-03-03", "VIBRANT")
    with pytest.raises(AlreadyCompletedError):
        await daily_task.complete_day(store, "2024-03-03", "VIBRANT", "x" * 11, max_content_length=10)
