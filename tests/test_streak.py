from catharsis.domain.streak import compute_stats, compute_streak
from catharsis.models.schema_models import TicketSchema


def make_ticket(ticket_id, date, word="ZENITH"):
    return TicketSchema(id=ticket_id, date=date, word=word, content="")


MARCH = ["2024-03-03", "2024-03-02", "2024-03-01"]


def test_streak_counts_through_today():
    assert compute_streak(MARCH, "2024-03-03") == 3


def test_streak_survives_one_grace_day():
    assert compute_streak(MARCH, "2024-03-04") == 3


def test_streak_resets_after_two_missed_days():
    assert compute_streak(MARCH, "2024-03-05") == 0


def test_streak_stops_at_first_gap():
    dates = ["2024-03-10", "2024-03-09", "2024-03-07", "2024-03-06", "2024-03-05"]
    assert compute_streak(dates, "2024-03-10") == 2
    assert compute_streak(dates, "2024-03-08") == 3


def test_streak_empty():
    assert compute_streak([], "2024-03-03") == 0


def test_streak_crosses_month_and_year_boundaries():
    dates = ["2024-03-01", "2024-02-29", "2024-02-28"]
    assert compute_streak(dates, "2024-03-01") == 3
    assert compute_streak(["2024-01-01", "2023-12-31"], "2024-01-02") == 2


def test_streak_ignores_future_and_unordered_dates():
    dates = ["2024-03-01", "2024-03-09", "2024-03-03", "2024-03-02"]
    assert compute_streak(dates, "2024-03-03") == 3


def test_compute_stats():
    tickets = [make_ticket(3, "2024-03-03"), make_ticket(2, "2024-03-02"), make_ticket(1, "2024-02-20")]
    stats = compute_stats(tickets, "2024-03-04")
    assert stats.total_tickets == 3
    assert stats.streak == 2
    assert [ticket.id for ticket in stats.history] == [3, 2, 1]


def test_compute_stats_empty():
    stats = compute_stats([], "2024-03-04")
    assert stats.model_dump(by_alias=True) == {"totalTickets": 0, "streak": 0, "history": []}
