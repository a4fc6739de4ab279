"""
Static catalog of the time zones the world clock knows about.

Each entry carries a fixed standard offset and, optionally, a daylight-saving
offset with an annual month/day window. Entries are created once at import
and never change.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class TimeZoneEntry:
    """A named region with its UTC offset and optional DST rule."""

    id: str
    display_name: str
    standard_offset_hours: float
    dst_offset_hours: Optional[float] = None
    dst_start_label: Optional[str] = None
    dst_end_label: Optional[str] = None

    def __post_init__(self) -> None:
        dst_fields = (self.dst_offset_hours, self.dst_start_label, self.dst_end_label)
        present = [field is not None for field in dst_fields]
        if any(present) and not all(present):
            raise ValueError(
                f"Zone '{self.id}' must define all of dst_offset_hours, "
                f"dst_start_label and dst_end_label, or none of them"
            )

    @property
    def has_dst(self) -> bool:
        return self.dst_offset_hours is not None

    @property
    def offset_label(self) -> str:
        """Standard offset rendered for display, e.g. 'UTC+5.5'."""
        return f"UTC{format_offset(self.standard_offset_hours)}"


def format_offset(hours: float) -> str:
    """
    Render an hour offset with an explicit sign.

    Integer offsets have no decimal suffix ('+9', '-5', '+0'); fractional
    offsets keep their fraction ('+5.5', '-3.5').
    """
    sign = '+' if hours >= 0 else '-'
    magnitude = abs(hours)
    if magnitude == int(magnitude):
        return f"{sign}{int(magnitude)}"
    return f"{sign}{magnitude:g}"


_CATALOG: Tuple[TimeZoneEntry, ...] = (
    TimeZoneEntry("utc", "UTC", 0),
    TimeZoneEntry("new_york", "New York", -5, -4, "March 10", "November 3"),
    TimeZoneEntry("los_angeles", "Los Angeles", -8, -7, "March 10", "November 3"),
    TimeZoneEntry("london", "London", 0, 1, "March 31", "October 27"),
    TimeZoneEntry("paris", "Paris", 1, 2, "March 31", "October 27"),
    TimeZoneEntry("dubai", "Dubai", 4),
    TimeZoneEntry("india", "India", 5.5),
    TimeZoneEntry("tokyo", "Tokyo", 9),
    # Southern hemisphere: the window wraps into the following year.
    TimeZoneEntry("sydney", "Sydney", 10, 11, "October 6", "April 7"),
)

_BY_ID = {entry.id: entry for entry in _CATALOG}


def get_catalog() -> List[TimeZoneEntry]:
    """Return all known zones in display order."""
    return list(_CATALOG)


def find_zone(zone_id: Optional[str]) -> Optional[TimeZoneEntry]:
    """Look up a zone by id. Returns None for unknown or empty ids."""
    if not zone_id:
        return None
    return _BY_ID.get(zone_id)


def get_zone_choices() -> List[Tuple[str, str]]:
    """
    Get the zones as selection choices.

    Returns:
        List of (display_name, zone_id) tuples
    """
    return [(f"{entry.display_name} ({entry.offset_label})", entry.id) for entry in _CATALOG]
