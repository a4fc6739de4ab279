"""
Fixed-offset local time computation.

Given a catalog entry and a reference instant, works out whether the zone's
DST window is active and shifts the instant by the effective offset. Every
function here is pure.
"""
from datetime import date, datetime, timedelta, timezone
from typing import NamedTuple

from core.clock.catalog import TimeZoneEntry

DST_LABEL_FORMAT = "%B %d %Y"


class ZoneTime(NamedTuple):
    """Wall-clock time for one zone at one reference instant."""
    wall_clock: datetime
    is_dst_active: bool


def parse_dst_label(label: str, year: int) -> date:
    """
    Combine a month/day label such as 'March 10' with a year.

    Raises:
        ValueError: If the label is not a valid English month name and day
    """
    return datetime.strptime(f"{label.strip()} {year}", DST_LABEL_FORMAT).date()


def to_utc(reference_instant: datetime) -> datetime:
    """Normalize an instant to aware UTC. Naive values are host local time."""
    return reference_instant.astimezone(timezone.utc)


def is_dst_active(entry: TimeZoneEntry, reference_instant: datetime) -> bool:
    """
    Return True when the reference date falls inside the entry's DST window.

    Both window labels are applied to the reference instant's own year and
    the check is inclusive at both ends. A window whose start falls after its
    end (one that wraps into the next year) never matches.
    """
    if not entry.has_dst:
        return False

    current = to_utc(reference_instant).date()
    start = parse_dst_label(entry.dst_start_label, current.year)
    end = parse_dst_label(entry.dst_end_label, current.year)
    return start <= current <= end


def effective_offset_hours(entry: TimeZoneEntry, dst_active: bool) -> float:
    if dst_active:
        return entry.dst_offset_hours
    return entry.standard_offset_hours


def local_time_for(entry: TimeZoneEntry, reference_instant: datetime) -> ZoneTime:
    """
    Compute the zone's wall-clock time at ``reference_instant``.

    The returned datetime carries a fixed-offset tzinfo named after the zone,
    so it still denotes the same instant; drop the tzinfo to get the bare
    wall-clock reading.
    """
    dst_active = is_dst_active(entry, reference_instant)
    offset = timedelta(hours=effective_offset_hours(entry, dst_active))
    zone = timezone(offset, entry.display_name)
    wall_clock = to_utc(reference_instant).astimezone(zone)
    return ZoneTime(wall_clock, dst_active)
