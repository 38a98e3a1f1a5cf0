"""
Season calendar for the ranked ladder.

One season per calendar month, numbered sequentially:
    2024/08 = S32, 2025/12 = S48, 2026/01 = S49
"""
import calendar
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .date_utils import format_ymd, split_ymd

BASE_YEAR = 2024
BASE_MONTH = 8  # 1-12
BASE_SEASON = 32

_SEASON_CODE_RE = re.compile(r"^S(\d+)$", re.IGNORECASE)


@dataclass(frozen=True)
class SeasonInfo:
    """Calendar bounds of a season."""
    code: str
    season_number: int
    year: int
    month: int
    start: str  # YYYY-MM-DD, first day of the month
    end: str  # YYYY-MM-DD, last day of the month

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "seasonNumber": self.season_number,
            "year": self.year,
            "month": self.month,
            "start": self.start,
            "end": self.end,
        }


def parse_season_number(season_code: str) -> Optional[int]:
    """Return the number of an "S<digits>" code, or None if it is not one."""
    match = _SEASON_CODE_RE.match(season_code.strip())
    if not match:
        return None
    return int(match.group(1))


def _add_months(year: int, month: int, delta: int) -> tuple[int, int]:
    total = year * 12 + (month - 1) + delta
    # divmod floors, so negative deltas borrow from the year correctly
    new_year, month_index = divmod(total, 12)
    return new_year, month_index + 1


def season_number_to_year_month(season_number: int) -> tuple[int, int]:
    """Get (year, month) of a season number."""
    return _add_months(BASE_YEAR, BASE_MONTH, season_number - BASE_SEASON)


def year_month_to_season_number(year: int, month: int) -> int:
    """Get the season number of a calendar year/month."""
    return (year - BASE_YEAR) * 12 + (month - BASE_MONTH) + BASE_SEASON


def _format_code(season_number: int) -> str:
    return f"S{season_number}"


def get_season_info(season_code: str) -> Optional[SeasonInfo]:
    """
    Resolve a season code to its calendar month.

    Args:
        season_code: Code like "S49" (prefix is case-insensitive)

    Returns:
        SeasonInfo, or None when the code is not a valid season code
    """
    season_number = parse_season_number(season_code)
    if season_number is None:
        return None

    year, month = season_number_to_year_month(season_number)
    # Strings are built from the triple; datetime.date stops at year 9999
    last_day = calendar.monthrange(year, month)[1]

    return SeasonInfo(
        code=_format_code(season_number),
        season_number=season_number,
        year=year,
        month=month,
        start=format_ymd(year, month, 1),
        end=format_ymd(year, month, last_day),
    )


def get_current_season_code(today: Optional[date] = None) -> str:
    today = today or date.today()
    return _format_code(year_month_to_season_number(today.year, today.month))


def get_recent_season_codes(count: int, from_code: Optional[str] = None) -> list[str]:
    """
    Get `count` consecutive season codes, most recent first.

    Args:
        count: Number of codes to return
        from_code: Newest code in the list (defaults to the current season)
    """
    base_code = from_code if from_code is not None else get_current_season_code()
    season_number = parse_season_number(base_code)
    if season_number is None or count <= 0:
        return []
    return [_format_code(season_number - i) for i in range(count)]


def get_season_code_from_date(date_str: str) -> str:
    """Get the season code a YYYY-MM-DD or ISO timestamp string falls in."""
    year, month, _ = split_ymd(date_str)
    return _format_code(year_month_to_season_number(year, month))


def get_current_month_range(today: Optional[date] = None) -> tuple[str, str]:
    """Get (start, end) day keys of the current calendar month."""
    today = today or date.today()
    last_day = calendar.monthrange(today.year, today.month)[1]
    return (
        format_ymd(today.year, today.month, 1),
        format_ymd(today.year, today.month, last_day),
    )


def get_season_label(season_code: str) -> str:
    """Get human readable season label, e.g. "S49 (2026/01)"."""
    info = get_season_info(season_code)
    if info is None:
        return season_code
    return f"{info.code} ({info.year}/{info.month:02d})"
