"""Local-day boundaries for per-user queries."""

from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo


def local_today(tz: ZoneInfo) -> date:
    """Return the current date in the given timezone."""
    return datetime.now(tz=tz).date()


def day_bounds(day: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return [start, end) of a local day as UTC datetimes."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = start + timedelta(days=1)
    return start.astimezone(UTC), end.astimezone(UTC)
