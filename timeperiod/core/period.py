"""Period class representing an immutable time span between two instants.

This module provides the Period class, a half-open interval [start, end)
over aware datetimes, together with its comparison, set and arithmetic
operations. Every operation returns a new Period built through the
validating constructor, so start <= end holds for every Period in
existence.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Iterator, Union

from dateutil.relativedelta import relativedelta

from timeperiod._internal.calendar import (
    first_month_of,
    iso_week_monday,
    midnight,
    month_start,
)
from timeperiod._internal.constants import (
    MAX_ISO_WEEK,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_QUARTER,
    MONTHS_PER_SEMESTER,
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
    SEMESTERS_PER_YEAR,
)
from timeperiod._internal.validation import validate_range
from timeperiod.config import get_default_timezone
from timeperiod.core.duration import Duration, DurationLike, is_inverted, to_duration
from timeperiod.core.instant import (
    InstantLike,
    calendar_difference,
    elapsed_seconds,
    shift,
    to_instant,
    to_utc,
)
from timeperiod.errors import (
    InvalidDurationError,
    LogicError,
    OrderingError,
    RangeError,
    StepError,
)

if TYPE_CHECKING:
    from datetime import timedelta, tzinfo

_LOGGER = logging.getLogger(__name__)

# A calendar factory accepts either an int year or an instant to read it from
YearOrInstant = Union[int, InstantLike]


class Period:
    """An immutable time span [start, end) between two instants.

    The start is contained in the period, the end is not. A period whose
    start equals its end is allowed; it contains exactly its start.

    Endpoints are aware datetimes. Comparisons work on absolute instants,
    so the same span expressed in two time zones is the same value, while
    the accessors hand back the datetimes exactly as they were supplied.

    Attributes:
        start: Start of the period (inclusive).
        end: End of the period (exclusive).

    Examples:
        >>> p = Period("2014-05-01T00:00:00Z", "2014-05-08T00:00:00Z")
        >>> p.contains("2014-05-07T23:59:59Z")
        True
        >>> p.contains("2014-05-08T00:00:00Z")  # End is exclusive
        False
        >>> str(p)
        '2014-05-01T00:00:00Z/2014-05-08T00:00:00Z'
    """

    __slots__ = ("_start", "_end", "_start_key", "_end_key")

    def __init__(self, start: InstantLike, end: InstantLike) -> None:
        """Create the period [start, end).

        Naive input is placed in the configured default time zone.

        Args:
            start: Start of the period (inclusive).
            end: End of the period (exclusive).

        Raises:
            OrderingError: If end is earlier than start.

        Examples:
            >>> Period("2014-05-01T00:00:00Z", "2014-05-01T00:00:00Z")
            Period('2014-05-01T00:00:00+00:00', '2014-05-01T00:00:00+00:00')
        """
        start_instant = to_instant(start)
        end_instant = to_instant(end)
        start_key = to_utc(start_instant)
        end_key = to_utc(end_instant)

        if start_key > end_key:
            _LOGGER.debug("Rejected period ending before it starts: %s > %s", start_key, end_key)
            raise OrderingError(
                f"end must not precede start: got start={start_instant.isoformat()}, "
                f"end={end_instant.isoformat()}"
            )

        self._start: datetime = start_instant
        self._end: datetime = end_instant
        self._start_key: datetime = start_key
        self._end_key: datetime = end_key

    # ------------------------------------------------------------------
    # Duration-anchored factories
    # ------------------------------------------------------------------

    @classmethod
    def from_duration(cls, start: InstantLike, duration: DurationLike) -> Period:
        """Create a period of the given length starting at start.

        Args:
            start: Start of the period.
            duration: Length of the period; see timeperiod.core.duration
                for the accepted shapes.

        Returns:
            The period [start, start + duration).

        Raises:
            InvalidDurationError: If duration runs backward from start.

        Examples:
            >>> Period.from_duration("2015-01-01T10:00:00Z", 3600).end.hour
            11
        """
        start_instant = to_instant(start)
        step = to_duration(duration)
        if is_inverted(step, start_instant):
            _LOGGER.debug("Rejected inverted duration %r from %s", step, start_instant)
            raise InvalidDurationError(
                f"duration must not be negative: got {step!r} from {start_instant.isoformat()}"
            )
        return cls(start_instant, shift(start_instant, step))

    @classmethod
    def from_duration_before_end(cls, end: InstantLike, duration: DurationLike) -> Period:
        """Create a period of the given length ending at end.

        Args:
            end: End of the period.
            duration: Length of the period.

        Returns:
            The period [end - duration, end).

        Raises:
            InvalidDurationError: If duration runs backward.

        Examples:
            >>> Period.from_duration_before_end("2015-01-02T00:00:00Z", "1 DAY").start.day
            1
        """
        end_instant = to_instant(end)
        step = to_duration(duration)
        start_instant = shift(end_instant, -step)
        if to_utc(start_instant) > to_utc(end_instant):
            _LOGGER.debug("Rejected inverted duration %r before %s", step, end_instant)
            raise InvalidDurationError(
                f"duration must not be negative: got {step!r} before {end_instant.isoformat()}"
            )
        return cls(start_instant, end_instant)

    # ------------------------------------------------------------------
    # Calendar-unit factories
    # ------------------------------------------------------------------

    @staticmethod
    def _unit_context(year: YearOrInstant) -> tuple[int, datetime | None, tzinfo]:
        """Split a factory's first argument into (year, instant, zone)."""
        if isinstance(year, int) and not isinstance(year, bool):
            return year, None, get_default_timezone()
        instant = to_instant(year)
        return instant.year, instant, instant.tzinfo  # type: ignore[return-value]

    @staticmethod
    def _require_index(name: str, index: int | None, instant: datetime | None) -> None:
        if index is None and instant is None:
            raise TypeError(f"{name} is required when the year is given as an int")

    @classmethod
    def _calendar_span(cls, start: datetime, length: relativedelta) -> Period:
        try:
            end = start + length
        except (OverflowError, ValueError) as e:
            raise RangeError(
                f"period starting {start.isoformat()} ends beyond year {MAX_YEAR}"
            ) from e
        return cls(start, end)

    @classmethod
    @validate_range(year=(MIN_YEAR, MAX_YEAR))
    def from_year(cls, year: YearOrInstant) -> Period:
        """Create the period covering a calendar year.

        Args:
            year: The year, or an instant whose year and zone are used.

        Returns:
            [January 1st, next January 1st) at midnight.

        Raises:
            RangeError: If year is outside the datetime range.

        Examples:
            >>> str(Period.from_year(2014))
            '2014-01-01T00:00:00Z/2015-01-01T00:00:00Z'
        """
        number, _, tz = cls._unit_context(year)
        return cls._calendar_span(
            month_start(number, 1, tz), relativedelta(months=MONTHS_PER_YEAR)
        )

    @classmethod
    @validate_range(year=(MIN_YEAR, MAX_YEAR), semester=(1, SEMESTERS_PER_YEAR))
    def from_semester(cls, year: YearOrInstant, semester: int | None = None) -> Period:
        """Create the period covering half of a calendar year.

        Args:
            year: The year, or an instant whose year, semester and zone are used.
            semester: 1 (January-June) or 2 (July-December).

        Raises:
            RangeError: If semester is not 1 or 2.

        Examples:
            >>> str(Period.from_semester(2014, 2))
            '2014-07-01T00:00:00Z/2015-01-01T00:00:00Z'
        """
        number, instant, tz = cls._unit_context(year)
        cls._require_index("semester", semester, instant)
        if semester is None:
            semester = (instant.month - 1) // MONTHS_PER_SEMESTER + 1  # type: ignore[union-attr]
        start = month_start(number, first_month_of(semester, MONTHS_PER_SEMESTER), tz)
        return cls._calendar_span(start, relativedelta(months=MONTHS_PER_SEMESTER))

    @classmethod
    @validate_range(year=(MIN_YEAR, MAX_YEAR), quarter=(1, QUARTERS_PER_YEAR))
    def from_quarter(cls, year: YearOrInstant, quarter: int | None = None) -> Period:
        """Create the period covering a calendar quarter.

        Raises:
            RangeError: If quarter is not between 1 and 4.

        Examples:
            >>> str(Period.from_quarter(2014, 3))
            '2014-07-01T00:00:00Z/2014-10-01T00:00:00Z'
        """
        number, instant, tz = cls._unit_context(year)
        cls._require_index("quarter", quarter, instant)
        if quarter is None:
            quarter = (instant.month - 1) // MONTHS_PER_QUARTER + 1  # type: ignore[union-attr]
        start = month_start(number, first_month_of(quarter, MONTHS_PER_QUARTER), tz)
        return cls._calendar_span(start, relativedelta(months=MONTHS_PER_QUARTER))

    @classmethod
    @validate_range(year=(MIN_YEAR, MAX_YEAR), month=(1, MONTHS_PER_YEAR))
    def from_month(cls, year: YearOrInstant, month: int | None = None) -> Period:
        """Create the period covering a calendar month.

        Raises:
            RangeError: If month is not between 1 and 12.

        Examples:
            >>> str(Period.from_month(2014, 3))
            '2014-03-01T00:00:00Z/2014-04-01T00:00:00Z'
        """
        number, instant, tz = cls._unit_context(year)
        cls._require_index("month", month, instant)
        if month is None:
            month = instant.month  # type: ignore[union-attr]
        return cls._calendar_span(month_start(number, month, tz), relativedelta(months=1))

    @classmethod
    @validate_range(year=(MIN_YEAR, MAX_YEAR), week=(1, MAX_ISO_WEEK))
    def from_week(cls, year: YearOrInstant, week: int | None = None) -> Period:
        """Create the period covering an ISO 8601 week, Monday to Monday.

        When an instant is given without a week, its ISO year and week
        are used, which may differ from its calendar year around New Year.

        Raises:
            RangeError: If week is not between 1 and 53.

        Examples:
            >>> str(Period.from_week(2014, 3))
            '2014-01-13T00:00:00Z/2014-01-20T00:00:00Z'
        """
        number, instant, tz = cls._unit_context(year)
        cls._require_index("week", week, instant)
        if week is None:
            number, week, _ = instant.isocalendar()  # type: ignore[union-attr]
        try:
            monday = iso_week_monday(number, week)
        except OverflowError as e:
            raise RangeError(f"week {week} of {number} is outside the datetime range") from e
        start = datetime(monday.year, monday.month, monday.day, tzinfo=tz)
        return cls._calendar_span(start, relativedelta(weeks=1))

    @classmethod
    def from_day(cls, day: InstantLike) -> Period:
        """Create the period covering the calendar day of an instant.

        The start is the instant truncated to midnight. Its tzinfo and its
        concrete datetime class are kept, so the offset and any datetime
        subclass of the input come back out in both endpoints.

        Examples:
            >>> p = Period.from_day("2008-07-01T22:35:17+08:00")
            >>> p.start.isoformat(), p.end.isoformat()
            ('2008-07-01T00:00:00+08:00', '2008-07-02T00:00:00+08:00')
        """
        instant = to_instant(day)
        return cls._calendar_span(midnight(instant), relativedelta(days=1))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def start(self) -> datetime:
        """Return the start of the period (inclusive)."""
        return self._start

    @property
    def end(self) -> datetime:
        """Return the end of the period (exclusive)."""
        return self._end

    @property
    def duration(self) -> relativedelta:
        """Return the calendar-relative length, same as get_duration()."""
        return self.get_duration()

    @property
    def timestamp_interval(self) -> float:
        """Return the elapsed seconds, same as get_timestamp_interval()."""
        return self.get_timestamp_interval()

    def get_duration(self) -> relativedelta:
        """Return the calendar-relative duration from start to end.

        Examples:
            >>> Period.from_month(2014, 2).get_duration()
            relativedelta(months=+1)
        """
        return calendar_difference(self._start, self._end)

    def get_timestamp_interval(self) -> float:
        """Return the elapsed seconds between start and end.

        Examples:
            >>> Period.from_day("2012-01-12T00:00:00Z").get_timestamp_interval()
            86400.0
        """
        return elapsed_seconds(self._start, self._end)

    def _span(self) -> timedelta:
        return self._end_key - self._start_key

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_before(self, other: Period | InstantLike) -> bool:
        """Return True if this period ends at or before other begins.

        Abutting periods are before one another; a period is also before
        its own end instant.

        Examples:
            >>> p = Period.from_month(2012, 1)
            >>> p.is_before(p.next())
            True
            >>> p.is_before(p.end)
            True
        """
        if isinstance(other, Period):
            return self._end_key <= other._start_key
        return self._end_key <= to_utc(to_instant(other))

    def is_after(self, other: Period | InstantLike) -> bool:
        """Return True if this period begins after other.

        For a period argument the periods may abut. For an instant the
        instant must be strictly earlier than start, since the start
        itself is part of this period.

        Examples:
            >>> p = Period.from_month(2012, 1)
            >>> p.next().is_after(p)
            True
            >>> p.is_after(p.start)
            False
        """
        if isinstance(other, Period):
            return self._start_key >= other._end_key
        return self._start_key > to_utc(to_instant(other))

    def abuts(self, other: Period) -> bool:
        """Return True if the periods meet at a boundary without overlapping.

        Examples:
            >>> Period.from_month(2012, 1).abuts(Period.from_month(2012, 2))
            True
        """
        touching = self._end_key == other._start_key or self._start_key == other._end_key
        return touching and not self.overlaps(other)

    def overlaps(self, other: Period) -> bool:
        """Return True if the periods share time.

        Periods that only touch at a boundary do not overlap.

        Examples:
            >>> Period.from_month(2014, 3).overlaps(Period.from_month(2014, 4))
            False
        """
        return self._start_key < other._end_key and other._start_key < self._end_key

    def contains(self, other: Period | InstantLike) -> bool:
        """Check if this period contains an instant or another period.

        For an instant: start <= instant < end, except that a zero-length
        period contains its single instant.
        For a period: other lies within [start, end], so a period contains
        its own tail.

        Examples:
            >>> Period.from_month(2014, 3).contains("2014-03-12T00:00:00Z")
            True
            >>> Period.from_year(2015).contains(Period.from_month(2015, 12))
            True
        """
        if isinstance(other, Period):
            return self._start_key <= other._start_key and other._end_key <= self._end_key

        point = to_utc(to_instant(other))
        if self._start_key == self._end_key:
            return point == self._start_key
        return self._start_key <= point < self._end_key

    def __contains__(self, other: Period | InstantLike) -> bool:
        """Support 'instant in period' and 'period in period' syntax."""
        return self.contains(other)

    def duration_less_than(self, other: Period) -> bool:
        """Return True if this period is shorter than other."""
        return self._span() < other._span()

    def duration_greater_than(self, other: Period) -> bool:
        """Return True if this period is longer than other."""
        return self._span() > other._span()

    def same_duration_as(self, other: Period) -> bool:
        """Return True if both periods last exactly as long."""
        return self._span() == other._span()

    def same_value_as(self, other: Period) -> bool:
        """Return True if both periods span the same absolute instants."""
        return self._start_key == other._start_key and self._end_key == other._end_key

    # ------------------------------------------------------------------
    # Endpoint and length transformations
    # ------------------------------------------------------------------

    def starting_on(self, start: InstantLike) -> Period:
        """Return a copy with a new start and the same end.

        Raises:
            OrderingError: If the new start is after end.
        """
        return self.__class__(start, self._end)

    def ending_on(self, end: InstantLike) -> Period:
        """Return a copy with a new end and the same start.

        Raises:
            OrderingError: If the new end is before start.
        """
        return self.__class__(self._start, end)

    def with_duration(self, duration: DurationLike) -> Period:
        """Return a period with the same start and the given length.

        Raises:
            InvalidDurationError: If duration runs backward.

        Examples:
            >>> p = Period.from_duration("2014-03-01T00:00:00Z", "2 weeks")
            >>> p.with_duration("1 MONTH") == Period.from_month(2014, 3)
            True
        """
        return self.from_duration(self._start, duration)

    def with_duration_before_end(self, duration: DurationLike) -> Period:
        """Return a period with the same end and the given length.

        Raises:
            InvalidDurationError: If duration runs backward.
        """
        return self.from_duration_before_end(self._end, duration)

    def move_start_date(self, duration: DurationLike) -> Period:
        """Shift the start by a duration, which may be negative.

        Raises:
            OrderingError: If the shifted start passes end.
        """
        return self.__class__(shift(self._start, to_duration(duration)), self._end)

    def move_end_date(self, duration: DurationLike) -> Period:
        """Shift the end by a duration, which may be negative.

        Raises:
            OrderingError: If the shifted end passes start.

        Examples:
            >>> p = Period.from_month(2012, 1).move_end_date("1 MONTH")
            >>> p == Period.from_duration("2012-01-01T00:00:00Z", "2 MONTHS")
            True
        """
        return self.__class__(self._start, shift(self._end, to_duration(duration)))

    def move(self, duration: DurationLike) -> Period:
        """Translate both endpoints by the same duration.

        A negative duration moves the period back in time.

        Examples:
            >>> p = Period("2016-01-01T15:32:12Z", "2016-01-15T12:00:01Z")
            >>> str(p.move("- 1 day"))
            '2015-12-31T15:32:12Z/2016-01-14T12:00:01Z'
        """
        step = to_duration(duration)
        return self.__class__(shift(self._start, step), shift(self._end, step))

    def next(self, duration: DurationLike | None = None) -> Period:
        """Return the period starting where this one ends.

        Args:
            duration: Length of the new period. Defaults to the calendar
                length of this period.

        Examples:
            >>> Period.from_month(2014, 1).next() == Period.from_month(2014, 2)
            True
        """
        if duration is None:
            duration = self.get_duration()
        return self.from_duration(self._end, duration)

    def previous(self, duration: DurationLike | None = None) -> Period:
        """Return the period ending where this one starts.

        Args:
            duration: Length of the new period. Defaults to the calendar
                length of this period.
        """
        if duration is None:
            duration = self.get_duration()
        return self.from_duration_before_end(self._start, duration)

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    def merge(self, *others: Period) -> Period:
        """Return the smallest period covering this one and all others.

        The periods need not overlap; the gaps between them are covered too.

        Raises:
            TypeError: If no period is given, or an argument is not a Period.

        Examples:
            >>> march = Period.from_month(2014, 3)
            >>> march.merge(Period.from_month(2014, 4)) == Period(
            ...     "2014-03-01T00:00:00Z", "2014-05-01T00:00:00Z"
            ... )
            True
        """
        if not others:
            raise TypeError("merge() requires at least one other period")
        for other in others:
            if not isinstance(other, Period):
                raise TypeError(f"expected Period, got {type(other).__name__}")

        periods = (self,) + others
        first = min(periods, key=lambda p: p._start_key)
        last = max(periods, key=lambda p: p._end_key)
        return self.__class__(first._start, last._end)

    def intersect(self, other: Period) -> Period:
        """Return the time shared by both periods.

        Raises:
            LogicError: If the periods do not overlap, including when they
                only abut.

        Examples:
            >>> a = Period.from_duration("2011-12-01T00:00:00Z", "5 MONTHS")
            >>> b = Period.from_duration("2012-01-01T00:00:00Z", "2 MONTHS")
            >>> a.intersect(b) == b
            True
        """
        if not self.overlaps(other):
            _LOGGER.debug("Cannot intersect non-overlapping periods %s and %s", self, other)
            raise LogicError(f"periods do not overlap: {self} and {other}")

        latest_start = max((self, other), key=lambda p: p._start_key)
        earliest_end = min((self, other), key=lambda p: p._end_key)
        return self.__class__(latest_start._start, earliest_end._end)

    def gap(self, other: Period) -> Period:
        """Return the period separating two non-overlapping periods.

        The result does not depend on argument order. Abutting periods
        are separated by a zero-length period at their shared boundary.

        Raises:
            LogicError: If the periods overlap.

        Examples:
            >>> a = Period.from_duration("2011-12-01T00:00:00Z", "2 MONTHS")
            >>> b = Period.from_duration("2012-06-15T00:00:00Z", "3 MONTHS")
            >>> str(a.gap(b))
            '2012-02-01T00:00:00Z/2012-06-15T00:00:00Z'
        """
        if self.overlaps(other):
            _LOGGER.debug("Cannot take the gap of overlapping periods %s and %s", self, other)
            raise LogicError(f"periods overlap: {self} and {other}")

        if other._start_key >= self._end_key:
            return self.__class__(self._end, other._start)
        return self.__class__(other._end, self._start)

    def diff(self, other: Period) -> list[Period]:
        """Return the parts of either period not covered by both.

        Args:
            other: A period overlapping this one.

        Returns:
            Zero, one or two periods sorted by start: none for equal
            periods, one when they share an endpoint, two otherwise.

        Raises:
            LogicError: If the periods do not overlap.

        Examples:
            >>> a = Period.from_duration("2013-01-01T10:00:00Z", "3 HOURS")
            >>> b = Period.from_duration("2013-01-01T11:00:00Z", "3 HOURS")
            >>> [p.get_timestamp_interval() for p in a.diff(b)]
            [3600.0, 3600.0]
        """
        if not self.overlaps(other):
            _LOGGER.debug("Cannot diff non-overlapping periods %s and %s", self, other)
            raise LogicError(f"periods do not overlap: {self} and {other}")

        pair = (self, other)
        by_start = sorted(pair, key=lambda p: p._start_key)
        by_end = sorted(pair, key=lambda p: p._end_key)
        candidates = [
            self.__class__(by_start[0]._start, by_start[1]._start),
            self.__class__(by_end[0]._end, by_end[1]._end),
        ]
        remainders = [p for p in candidates if p._start_key != p._end_key]
        return sorted(remainders, key=lambda p: p._start_key)

    def date_interval_diff(self, other: Period) -> relativedelta:
        """Return how much longer other is, as a calendar-relative duration.

        The difference is measured from this period's end to this
        period's start shifted by other's length, so it is positive when
        other is longer and swapping the operands negates it.

        Examples:
            >>> a = Period.from_duration("2012-01-01T00:00:00Z", "1 HOUR")
            >>> b = Period.from_duration("2012-01-01T00:00:00Z", "2 HOURS")
            >>> a.date_interval_diff(b)
            relativedelta(hours=+1)
        """
        return calendar_difference(self._end, self._start + other.get_duration())

    def timestamp_interval_diff(self, other: Period) -> float:
        """Return how many seconds longer other is than this period.

        Examples:
            >>> a = Period.from_duration("2012-01-01T00:00:00Z", "1 HOUR")
            >>> b = Period.from_duration("2012-01-01T00:00:00Z", "2 HOURS")
            >>> a.timestamp_interval_diff(b)
            3600.0
        """
        return other.get_timestamp_interval() - self.get_timestamp_interval()

    # ------------------------------------------------------------------
    # Decomposition
    # ------------------------------------------------------------------

    def _boundary(self, step: Duration, index: int) -> datetime:
        """Return start moved by index steps, checking that time advances."""
        previous = shift(self._start, step * (index - 1)) if index > 1 else self._start
        current = shift(self._start, step * index)
        if to_utc(current) <= to_utc(previous):
            _LOGGER.debug("Rejected non-advancing step %r at index %d", step, index)
            raise StepError(f"interval must move time forward: got {step!r}")
        return current

    def split(self, interval: DurationLike) -> Iterator[Period]:
        """Tile the period with consecutive sub-periods of a given length.

        The last sub-period is truncated to end with this period. Merging
        all sub-periods gives back this period. Each call starts a new,
        independent traversal from start.

        Args:
            interval: Length of each sub-period.

        Returns:
            A generator of Periods.

        Raises:
            StepError: If interval does not move time forward.

        Examples:
            >>> day = Period.from_duration("2012-01-12T00:00:00Z", "1 DAY")
            >>> len(list(day.split(3600)))
            24
            >>> [p.get_timestamp_interval() for p in day.split("10 HOURS")][-1]
            14400.0
        """
        step = to_duration(interval)
        self._boundary(step, 1)
        return self._split(step)

    def _split(self, step: Duration) -> Iterator[Period]:
        lower = self._start
        index = 0
        while True:
            index += 1
            upper = self._boundary(step, index)
            if to_utc(upper) >= self._end_key:
                yield self.__class__(lower, self._end)
                return
            yield self.__class__(lower, upper)
            lower = upper

    def get_date_period(
        self, interval: DurationLike, exclude_start: bool = False
    ) -> Iterator[datetime]:
        """Step through the period, yielding instants a fixed interval apart.

        The instants are start, start + interval, start + 2 * interval, ...
        for as long as they come before end.

        Args:
            interval: Distance between two instants.
            exclude_start: If True, start itself is not yielded.

        Returns:
            A generator of datetimes.

        Raises:
            StepError: If interval does not move time forward.

        Examples:
            >>> day = Period.from_duration("2012-01-12T00:00:00Z", "1 DAY")
            >>> len(list(day.get_date_period("2 HOURS")))
            12
            >>> len(list(day.get_date_period(9600, exclude_start=True)))
            8
        """
        step = to_duration(interval)
        self._boundary(step, 1)
        return self._date_period(step, exclude_start)

    def _date_period(self, step: Duration, exclude_start: bool) -> Iterator[datetime]:
        index = 1 if exclude_start else 0
        while True:
            point = self._boundary(step, index) if index else self._start
            if to_utc(point) >= self._end_key:
                return
            yield point
            index += 1

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        """Return the structured form of this period; see timeperiod.convert."""
        from timeperiod.convert.json import to_json

        return to_json(self)

    def __eq__(self, other: object) -> bool:
        """Check value equality with another period.

        Examples:
            >>> Period.from_month(2012, 1) == Period.from_duration(
            ...     "2012-01-01T00:00:00Z", "1 MONTH"
            ... )
            True
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self.same_value_as(other)

    def __ne__(self, other: object) -> bool:
        """Check inequality with another period."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        """Return a hash based on the absolute endpoints."""
        return hash((self._start_key, self._end_key))

    def __reduce__(self) -> tuple[type[Period], tuple[datetime, datetime]]:
        """Rebuild through the validating constructor when unpickled or copied."""
        return (self.__class__, (self._start, self._end))

    def __repr__(self) -> str:
        """Return a representation that evaluates back to an equal period.

        Examples:
            >>> repr(Period.from_day("2014-05-01T00:00:00Z"))
            "Period('2014-05-01T00:00:00+00:00', '2014-05-02T00:00:00+00:00')"
        """
        return (
            f"{self.__class__.__name__}"
            f"({self._start.isoformat()!r}, {self._end.isoformat()!r})"
        )

    def __str__(self) -> str:
        """Return the period as a UTC ISO 8601 interval.

        Examples:
            >>> str(Period("2014-05-01T00:00:00+03:00", "2014-05-08T00:00:00+03:00"))
            '2014-04-30T21:00:00Z/2014-05-07T21:00:00Z'
        """
        from timeperiod.format.iso8601 import format_interval

        return format_interval(self._start, self._end)


__all__ = ["Period"]
