"""
Data models for DuelLog match tracking.
"""
from dataclasses import dataclass, field
from typing import Optional

from ..utils.date_utils import get_day_key

# Play order
FIRST = "先攻"
SECOND = "後攻"

# Match result
WIN = "W"
LOSS = "L"

UNKNOWN_DECK = "未知"
NO_THEME = "無"


@dataclass
class DeckRef:
    """A deck as recorded on a match: main archetype plus optional sub archetype."""
    main: str = ""
    sub: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "DeckRef":
        data = data or {}
        return cls(
            main=data.get("main") or "",
            sub=data.get("sub"),
            id=data.get("id"),
        )

    def to_dict(self) -> dict:
        result = {"main": self.main, "sub": self.sub}
        if self.id is not None:
            result["id"] = self.id
        return result


@dataclass
class Match:
    """A single logged ranked match."""
    id: str
    date: str  # YYYY-MM-DD or ISO timestamp
    play_order: str  # FIRST or SECOND
    result: str  # WIN or LOSS
    my_deck: DeckRef = field(default_factory=DeckRef)
    opp_deck: DeckRef = field(default_factory=DeckRef)
    rank: str = ""
    note: Optional[str] = None
    mode: str = "Ranked"
    season_code: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def day(self) -> str:
        return get_day_key(self.date)

    @property
    def is_win(self) -> bool:
        return self.result == WIN

    @property
    def went_first(self) -> bool:
        return self.play_order == FIRST

    @classmethod
    def from_dict(cls, data: dict) -> "Match":
        """Build from the camelCase payload returned by GET /matches."""
        return cls(
            id=str(data.get("id", "")),
            date=data.get("date", ""),
            play_order=data.get("playOrder", ""),
            result=data.get("result", ""),
            my_deck=DeckRef.from_dict(data.get("myDeck")),
            opp_deck=DeckRef.from_dict(data.get("oppDeck")),
            rank=data.get("rank") or "",
            note=data.get("note"),
            mode=data.get("mode") or "Ranked",
            season_code=data.get("seasonCode"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "mode": self.mode,
            "rank": self.rank,
            "myDeck": self.my_deck.to_dict(),
            "oppDeck": self.opp_deck.to_dict(),
            "playOrder": self.play_order,
            "result": self.result,
            "note": self.note,
            "seasonCode": self.season_code,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class DeckTemplate:
    """A named deck with its display theme."""
    id: str
    name: str
    theme: str = NO_THEME
    deck_type: str = "main"  # main, sub

    @classmethod
    def from_dict(cls, data: dict) -> "DeckTemplate":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            theme=data.get("theme") or NO_THEME,
            deck_type=data.get("deckType") or "main",
        )


@dataclass
class DeckStatRow:
    """Win/loss breakdown for one deck name."""
    name: str
    games: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0  # 0-100

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "games": self.games,
            "wins": self.wins,
            "losses": self.losses,
            "winRate": self.win_rate,
        }


@dataclass
class DailyStatRow:
    """Totals and play-order splits for one calendar day."""
    date: str
    games: int = 0
    wins: int = 0
    losses: int = 0
    first: int = 0
    second: int = 0
    first_wins: int = 0
    first_losses: int = 0
    second_wins: int = 0
    second_losses: int = 0
    # None when the denominator is zero (no matches), as opposed to 0%
    first_rate: Optional[float] = None
    win_rate: Optional[float] = None
    first_win_rate: Optional[float] = None
    second_win_rate: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "games": self.games,
            "wins": self.wins,
            "losses": self.losses,
            "first": self.first,
            "second": self.second,
            "firstWins": self.first_wins,
            "firstLosses": self.first_losses,
            "secondWins": self.second_wins,
            "secondLosses": self.second_losses,
            "firstRate": self.first_rate,
            "winRate": self.win_rate,
            "firstWinRate": self.first_win_rate,
            "secondWinRate": self.second_win_rate,
        }


@dataclass
class SeasonStats:
    """Aggregated statistics over a list of matches."""
    total: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0
    first_count: int = 0
    second_count: int = 0
    first_wins: int = 0
    second_wins: int = 0
    first_rate: float = 0.0
    first_win_rate: float = 0.0
    second_win_rate: float = 0.0
    opp_decks: list[DeckStatRow] = field(default_factory=list)
    my_decks: list[DeckStatRow] = field(default_factory=list)
    daily: list[DailyStatRow] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "wins": self.wins,
            "losses": self.losses,
            "winRate": self.win_rate,
            "firstCount": self.first_count,
            "secondCount": self.second_count,
            "firstWins": self.first_wins,
            "secondWins": self.second_wins,
            "firstRate": self.first_rate,
            "firstWinRate": self.first_win_rate,
            "secondWinRate": self.second_win_rate,
            "oppDecks": [r.to_dict() for r in self.opp_decks],
            "myDecks": [r.to_dict() for r in self.my_decks],
            "daily": [r.to_dict() for r in self.daily],
        }
