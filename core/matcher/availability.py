#!/usr/bin/env python3
"""
Availability - the two availability shapes a volunteer profile can carry.

Profiles store availability either as a list of calendar dates (optionally
containing an "always available" token such as ``flexible``) or as a map of
weekday name to ``True``/``False`` or to a list of time-of-day buckets.
Both shapes are kept as separate variants, each answering the same question:
is the volunteer available on a given calendar day?
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, FrozenSet, Iterable, Optional, Union
import logging

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

# Index matches date.weekday() (Monday == 0)
WEEKDAYS = (
    'monday',
    'tuesday',
    'wednesday',
    'thursday',
    'friday',
    'saturday',
    'sunday',
)

TIME_BUCKETS = ('morning', 'afternoon', 'evening', 'night')

ALWAYS_AVAILABLE_TOKENS = frozenset({'any', 'all', 'flexible', 'everyday', 'daily'})


def to_date(value: Any) -> Optional[date]:
    """
    Coerce a date-like value to a calendar date.

    Accepts ``date``, ``datetime`` and ISO-8601 strings
    (``2025-07-20``, ``2025-07-20T09:00:00Z``). Returns None for
    anything that cannot be interpreted.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return isoparse(text).date()
        except (ValueError, OverflowError):
            logger.debug(f"Ignoring unparseable date value: {value!r}")
            return None
    return None


def weekday_name(value: Any) -> Optional[str]:
    """Lower-case Gregorian weekday name for a date-like value."""
    day = to_date(value)
    if day is None:
        return None
    return WEEKDAYS[day.weekday()]


class Availability(ABC):
    """Common interface for both availability variants."""

    @abstractmethod
    def is_available_on(self, day: date) -> bool:
        """Return True if the volunteer is available on ``day``."""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if no availability at all is recorded."""
        pass


@dataclass
class DateSetAvailability(Availability):
    """Availability as a set of exact calendar dates."""
    dates: FrozenSet[date] = frozenset()
    always: bool = False

    def is_available_on(self, day: date) -> bool:
        if self.always:
            return True
        return day in self.dates

    def is_empty(self) -> bool:
        return not self.always and not self.dates


@dataclass
class WeekdayAvailability(Availability):
    """Availability as weekday -> bool or weekday -> time buckets."""
    days: Dict[str, Union[bool, FrozenSet[str]]] = field(default_factory=dict)

    def is_available_on(self, day: date) -> bool:
        slot = self.days.get(WEEKDAYS[day.weekday()])
        if isinstance(slot, bool):
            return slot
        return bool(slot)

    def is_empty(self) -> bool:
        return not any(self.days.values())


def _parse_date_list(
    entries: Iterable[Any],
    always_tokens: FrozenSet[str]
) -> DateSetAvailability:
    dates = set()
    always = False
    for entry in entries:
        if isinstance(entry, str) and entry.strip().lower() in always_tokens:
            always = True
            continue
        day = to_date(entry)
        if day is not None:
            dates.add(day)
    return DateSetAvailability(dates=frozenset(dates), always=always)


def _parse_weekday_map(raw: Dict[Any, Any]) -> WeekdayAvailability:
    days: Dict[str, Union[bool, FrozenSet[str]]] = {}
    for key, value in raw.items():
        name = str(key).strip().lower()
        if name not in WEEKDAYS:
            continue
        if isinstance(value, bool):
            days[name] = value
        elif isinstance(value, (list, tuple, set, frozenset)):
            days[name] = frozenset(
                b.strip().lower() for b in value if isinstance(b, str) and b.strip()
            )
    return WeekdayAvailability(days=days)


def parse_availability(
    raw: Any,
    always_tokens: Optional[Iterable[str]] = None
) -> Availability:
    """
    Build an availability variant from the raw profile value.

    Lists/tuples/sets become a DateSetAvailability, dicts become a
    WeekdayAvailability. Anything else (None, strings, numbers) yields an
    empty WeekdayAvailability. Never raises: malformed entries are dropped.

    Args:
        raw: Value stored on the volunteer profile.
        always_tokens: Tokens meaning "always available" in a date list.

    Returns:
        Availability variant.
    """
    if isinstance(raw, Availability):
        return raw

    tokens = frozenset(
        t.strip().lower()
        for t in (ALWAYS_AVAILABLE_TOKENS if always_tokens is None else always_tokens)
    )

    if isinstance(raw, dict):
        return _parse_weekday_map(raw)
    if isinstance(raw, (list, tuple, set, frozenset)):
        return _parse_date_list(raw, tokens)

    if raw is not None:
        logger.debug(f"Unsupported availability shape {type(raw).__name__}; treating as empty")
    return WeekdayAvailability()
