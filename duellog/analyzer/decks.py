"""
Per-deck win/loss aggregation.
"""
from collections import defaultdict
from typing import Callable, Iterable

from ..client.models import DeckRef, DeckStatRow, Match, UNKNOWN_DECK


def deck_key(deck: DeckRef) -> str:
    """Grouping key for a deck: its main archetype, or the unknown label."""
    if deck is None or not deck.main:
        return UNKNOWN_DECK
    return deck.main


def aggregate_decks(
    matches: Iterable[Match],
    key_func: Callable[[Match], str],
) -> list[DeckStatRow]:
    """
    Count wins and losses per deck name.

    Args:
        matches: Matches to aggregate
        key_func: Extracts the grouping key (deck name) from a match

    Returns:
        One row per distinct key, sorted by games played (descending)
    """
    counters: dict[str, dict] = defaultdict(lambda: {"wins": 0, "losses": 0})

    for match in matches:
        entry = counters[key_func(match)]
        if match.is_win:
            entry["wins"] += 1
        else:
            entry["losses"] += 1

    rows = []
    for name, counts in counters.items():
        games = counts["wins"] + counts["losses"]
        rows.append(DeckStatRow(
            name=name,
            games=games,
            wins=counts["wins"],
            losses=counts["losses"],
            win_rate=(counts["wins"] / games) * 100 if games > 0 else 0,
        ))

    # sorted() is stable: equal counts keep first-seen order
    return sorted(rows, key=lambda r: r.games, reverse=True)


def my_deck_stats(matches: Iterable[Match]) -> list[DeckStatRow]:
    return aggregate_decks(matches, lambda m: deck_key(m.my_deck))


def opp_deck_stats(matches: Iterable[Match]) -> list[DeckStatRow]:
    return aggregate_decks(matches, lambda m: deck_key(m.opp_deck))
