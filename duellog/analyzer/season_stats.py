"""
Season statistics: totals, play-order split, deck breakdowns and the daily series.
"""
from collections import defaultdict
from typing import Any, Optional

from .decks import my_deck_stats, opp_deck_stats
from ..client.models import DailyStatRow, Match, SeasonStats, LOSS, SECOND, WIN
from ..utils.date_utils import iter_days


def _rate(numerator: int, denominator: int) -> float:
    return (numerator / denominator) * 100 if denominator > 0 else 0


def _day_rate(numerator: int, denominator: int) -> Optional[float]:
    return (numerator / denominator) * 100 if denominator > 0 else None


def _range_bounds(date_range: Any) -> Optional[tuple[str, str]]:
    """Accept {"start", "end"} dicts, (start, end) tuples or SeasonInfo."""
    if not date_range:
        return None
    if isinstance(date_range, dict):
        start, end = date_range.get("start"), date_range.get("end")
    elif isinstance(date_range, (tuple, list)):
        start, end = date_range
    else:
        start, end = date_range.start, date_range.end
    if not start or not end:
        return None
    return start, end


def _new_day() -> dict[str, int]:
    return {
        "wins": 0,
        "losses": 0,
        "first": 0,
        "second": 0,
        "first_wins": 0,
        "first_losses": 0,
        "second_wins": 0,
        "second_losses": 0,
    }


def _daily_row(day: str, entry: Optional[dict[str, int]]) -> DailyStatRow:
    if entry is None:
        return DailyStatRow(date=day)

    games = entry["wins"] + entry["losses"]
    return DailyStatRow(
        date=day,
        games=games,
        wins=entry["wins"],
        losses=entry["losses"],
        first=entry["first"],
        second=entry["second"],
        first_wins=entry["first_wins"],
        first_losses=entry["first_losses"],
        second_wins=entry["second_wins"],
        second_losses=entry["second_losses"],
        first_rate=_day_rate(entry["first"], games),
        win_rate=_day_rate(entry["wins"], games),
        first_win_rate=_day_rate(entry["first_wins"], entry["first"]),
        second_win_rate=_day_rate(entry["second_wins"], entry["second"]),
    )


def build_daily_series(matches: list[Match], date_range: Any = None) -> list[DailyStatRow]:
    """
    Build one row per day.

    With a date range every day from start to end is emitted, days without
    matches as empty rows. Without one only days that have matches are
    emitted, in ascending date order.
    """
    by_day: dict[str, dict[str, int]] = defaultdict(_new_day)

    for match in matches:
        entry = by_day[match.day]
        win = match.is_win

        if win:
            entry["wins"] += 1
        else:
            entry["losses"] += 1

        if match.went_first:
            entry["first"] += 1
            entry["first_wins" if win else "first_losses"] += 1
        else:
            entry["second"] += 1
            entry["second_wins" if win else "second_losses"] += 1

    bounds = _range_bounds(date_range)
    if bounds is not None:
        return [_daily_row(day, by_day.get(day)) for day in iter_days(*bounds)]

    return [_daily_row(day, by_day[day]) for day in sorted(by_day)]


def build_season_stats(matches: list[Match], date_range: Any = None) -> SeasonStats:
    """
    Aggregate a list of matches into SeasonStats.

    The matches are used as given; filtering by season, deck or date is done
    by the caller.

    Args:
        matches: Matches to aggregate
        date_range: Optional inclusive {"start", "end"} day keys forcing a
            contiguous daily series
    """
    total = len(matches)
    wins = sum(1 for m in matches if m.result == WIN)
    losses = sum(1 for m in matches if m.result == LOSS)

    first_matches = [m for m in matches if m.went_first]
    second_matches = [m for m in matches if m.play_order == SECOND]
    first_count = len(first_matches)
    second_count = len(second_matches)
    first_wins = sum(1 for m in first_matches if m.is_win)
    second_wins = sum(1 for m in second_matches if m.is_win)

    return SeasonStats(
        total=total,
        wins=wins,
        losses=losses,
        win_rate=_rate(wins, total),
        first_count=first_count,
        second_count=second_count,
        first_wins=first_wins,
        second_wins=second_wins,
        first_rate=_rate(first_count, total),
        first_win_rate=_rate(first_wins, first_count),
        second_win_rate=_rate(second_wins, second_count),
        opp_decks=opp_deck_stats(matches),
        my_decks=my_deck_stats(matches),
        daily=build_daily_series(matches, date_range),
    )
