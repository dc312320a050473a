"""
Calendar arithmetic shared by streak and scheduling rules.

Day boundaries are calendar dates (year/month/day), never elapsed hours:
two activities 30 hours apart on consecutive dates are one day apart.
"""

from datetime import UTC, date, datetime, timedelta


def utc_now() -> datetime:
    return datetime.now(UTC)


def ensure_aware(moment: datetime) -> datetime:
    """Read a timezone-less datetime as UTC; aware datetimes pass through."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def resolve_now(now: datetime | None = None) -> datetime:
    """The given moment as an aware datetime, or the current UTC time."""
    return utc_now() if now is None else ensure_aware(now)


def _local_date(moment: datetime, reference: datetime) -> date:
    # Compare aware datetimes in the reference's timezone so both dates
    # are read off the same wall calendar.
    if moment.tzinfo is not None and reference.tzinfo is not None:
        return moment.astimezone(reference.tzinfo).date()
    return moment.date()


def calendar_days_between(earlier: datetime, later: datetime) -> int:
    """Absolute number of calendar days separating two moments."""
    return abs((later.date() - _local_date(earlier, later)).days)


def is_same_day(first: datetime, second: datetime) -> bool:
    return calendar_days_between(first, second) == 0


def is_previous_day(candidate: datetime, now: datetime) -> bool:
    """True when ``candidate`` falls on the calendar day before ``now``."""
    return _local_date(candidate, now) == now.date() - timedelta(days=1)


def add_days(moment: datetime, days: int) -> datetime:
    """Shift by whole calendar days, keeping the wall-clock time."""
    return moment + timedelta(days=days)


def hours_between(start: datetime, end: datetime) -> float:
    return (ensure_aware(end) - ensure_aware(start)).total_seconds() / 3600
