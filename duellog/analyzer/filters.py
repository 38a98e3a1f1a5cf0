"""
Local match filtering applied before aggregation.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from ..client.models import Match


@dataclass
class StatsFilters:
    """Deck and date sub-range filters for a stats view."""
    my_deck_main: Optional[str] = None
    opp_deck_main: Optional[str] = None
    date_from: Optional[str] = None  # YYYY-MM-DD, inclusive
    date_to: Optional[str] = None  # YYYY-MM-DD, inclusive

    @classmethod
    def from_args(cls, args) -> "StatsFilters":
        """Build from a mapping of camelCase query parameters."""
        return cls(
            my_deck_main=args.get("myDeckMain") or None,
            opp_deck_main=args.get("oppDeckMain") or None,
            date_from=args.get("dateFrom") or None,
            date_to=args.get("dateTo") or None,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.my_deck_main or self.opp_deck_main or self.date_from or self.date_to)


def matches_filter(match: Match, filters: StatsFilters) -> bool:
    if filters.my_deck_main and match.my_deck.main != filters.my_deck_main:
        return False
    if filters.opp_deck_main and match.opp_deck.main != filters.opp_deck_main:
        return False

    day = match.day
    if filters.date_from and day < filters.date_from:
        return False
    if filters.date_to and day > filters.date_to:
        return False
    return True


def filter_matches(matches: Iterable[Match], filters: Optional[StatsFilters] = None) -> list[Match]:
    """Return the matches passing every set filter, in their original order."""
    if filters is None or filters.is_empty:
        return list(matches)
    return [m for m in matches if matches_filter(m, filters)]
