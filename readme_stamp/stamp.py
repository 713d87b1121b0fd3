"""
Week label computation.

The label written into every README names the Sunday of the current week
together with its ISO-8601 week number, e.g.::

    本周记录: 2024-01-07 · 2024年第1周
"""

import datetime
import math
from typing import Optional, Tuple

from .models import WeekStamp

# Must stay byte-identical across releases, otherwise already stamped
# READMEs get a second marker line.
MARKER_PREFIX = "本周记录:"


def iso_week(day: datetime.date) -> Tuple[int, int]:
    """
    Return ``(iso_year, iso_week)`` for a calendar date.

    The date is moved to the Thursday of its Monday-based week; that
    Thursday's year is the ISO year and its ordinal decides the week.
    """
    thursday = day + datetime.timedelta(days=4 - day.isoweekday())
    year_start = datetime.date(thursday.year, 1, 1)
    week = math.ceil(((thursday - year_start).days + 1) / 7)
    return thursday.year, week


def week_sunday(day: datetime.date, roll_forward: bool = True) -> datetime.date:
    """
    Sunday of the week containing ``day``.

    With ``roll_forward`` (the default) this is ``day`` itself on a Sunday,
    otherwise the next Sunday. Without it, the most recent Sunday.
    """
    since_sunday = day.isoweekday() % 7  # Sunday == 0
    if roll_forward:
        return day + datetime.timedelta(days=(7 - since_sunday) % 7)
    return day - datetime.timedelta(days=since_sunday)


def compute_week_stamp(
    now: Optional[datetime.datetime] = None,
    prefix: str = MARKER_PREFIX,
    roll_forward: bool = True,
) -> WeekStamp:
    """
    Build the WeekStamp for the instant ``now`` (UTC, defaults to the current time).

    Args:
        now: Reference instant. Naive values are taken to be UTC.
        prefix: Marker token the label starts with.
        roll_forward: Pick the upcoming Sunday rather than the previous one.

    Returns:
        WeekStamp whose ``label_text`` is the exact line to write.
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(datetime.timezone.utc)

    sunday = week_sunday(now.date(), roll_forward=roll_forward)
    year, week = iso_week(sunday)
    label = f"{prefix} {sunday:%Y-%m-%d} · {year}年第{week}周"
    return WeekStamp(sunday_date=sunday, iso_year=year, iso_week=week, label_text=label)
