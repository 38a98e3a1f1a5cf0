import calendar
from typing import Iterator


def get_day_key(date_str: str) -> str:
    """Get the YYYY-MM-DD day key of a date or ISO timestamp string."""
    if "T" in date_str:
        return date_str.split("T")[0]
    return date_str


def split_ymd(date_str: str) -> tuple[int, int, int]:
    """Split a YYYY-MM-DD string into a naive (year, month, day) triple."""
    parts = [int(p) for p in get_day_key(date_str).split("-")]
    year = parts[0]
    month = parts[1] if len(parts) > 1 else 1
    day = parts[2] if len(parts) > 2 else 1
    return year, month, day


def format_ymd(year: int, month: int, day: int) -> str:
    return f"{year}-{month:02d}-{day:02d}"


def iter_days(start: str, end: str) -> Iterator[str]:
    """Yield every day key from start to end, both inclusive."""
    # Plain triples instead of datetime.date, which stops at year 9999
    year, month, day = split_ymd(start)
    last = split_ymd(end)
    while (year, month, day) <= last:
        yield format_ymd(year, month, day)
        day += 1
        if day > calendar.monthrange(year, month)[1]:
            day = 1
            month += 1
            if month > 12:
                month = 1
                year += 1
