"""Tests for Period ordering, overlap, containment and equality."""

from datetime import datetime, timedelta, timezone

import pytest

from timeperiod import Period

UTC = timezone.utc
PLUS_3 = timezone(timedelta(hours=3))


@pytest.fixture
def january() -> Period:
    return Period.from_month(2012, 1)


class TestBeforeAndAfter:
    """Tests for is_before and is_after."""

    def test_is_before_next_period(self, january: Period) -> None:
        """A period is before the one starting at its end."""
        assert january.is_before(january.next())
        assert not january.next().is_before(january)

    def test_is_before_own_end(self, january: Period) -> None:
        """The end is excluded, so the period is before it."""
        assert january.is_before(january.end)
        assert january.is_before("2012-02-01T00:00:00Z")

    def test_is_not_before_inner_instant(self, january: Period) -> None:
        """A period is not before an instant it contains."""
        assert not january.is_before("2012-01-15")
        assert not january.is_before(january.start)

    def test_is_after_previous_period(self, january: Period) -> None:
        """A period is after the one ending at its start."""
        assert january.is_after(january.previous())
        assert not january.previous().is_after(january)

    def test_is_not_after_own_start(self, january: Period) -> None:
        """The start belongs to the period, so it is not after it."""
        assert not january.is_after(january.start)

    def test_is_after_earlier_instant(self, january: Period) -> None:
        """A period is after an instant preceding its start."""
        assert january.is_after("2011-12-31T23:59:59Z")
        assert not january.is_after("2012-01-15")

    def test_overlapping_periods_are_neither(self, january: Period) -> None:
        """Overlapping periods are neither before nor after each other."""
        other = Period("2012-01-15", "2012-02-15")

        assert not january.is_before(other)
        assert not january.is_after(other)

    def test_comparison_uses_absolute_instants(self, january: Period) -> None:
        """An instant written with an offset is compared as an absolute instant."""
        # 02:00+03:00 on February 1st is 23:00 UTC on January 31st
        assert not january.is_before(datetime(2012, 2, 1, 2, tzinfo=PLUS_3))


class TestAbutsAndOverlaps:
    """Tests for abuts and overlaps."""

    def test_consecutive_months_abut(self, january: Period) -> None:
        """Periods sharing a boundary abut in both directions."""
        february = Period.from_month(2012, 2)

        assert january.abuts(february)
        assert february.abuts(january)

    def test_separated_periods_do_not_abut(self, january: Period) -> None:
        """A gap between periods means they do not abut."""
        assert not january.abuts(Period.from_month(2012, 3))

    def test_overlapping_periods_do_not_abut(self, january: Period) -> None:
        """Overlap rules out abutting."""
        assert not january.abuts(Period("2011-12-15", "2012-01-15"))

    def test_abutting_periods_do_not_overlap(self, january: Period) -> None:
        """Sharing only a boundary is not an overlap."""
        assert not january.overlaps(Period.from_month(2012, 2))
        assert not Period.from_month(2012, 2).overlaps(january)

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            ("2011-12-15", "2012-01-15"),
            ("2012-01-15", "2012-02-15"),
            ("2012-01-10", "2012-01-20"),
            ("2011-12-01", "2012-03-01"),
            ("2012-01-01", "2012-02-01"),
        ],
    )
    def test_overlaps_is_commutative(self, january: Period, start, end) -> None:
        """Overlap holds in both directions."""
        other = Period(start, end)

        assert january.overlaps(other)
        assert other.overlaps(january)

    def test_separated_periods_do_not_overlap(self, january: Period) -> None:
        """Periods with a gap between them do not overlap."""
        assert not january.overlaps(Period.from_month(2012, 6))


class TestContains:
    """Tests for contains and the 'in' operator."""

    def test_contains_start(self, january: Period) -> None:
        """The start is inside the period."""
        assert january.contains(january.start)

    def test_does_not_contain_end(self, january: Period) -> None:
        """The end is outside the period."""
        assert not january.contains(january.end)

    def test_contains_inner_instant(self, january: Period) -> None:
        """Instants between the bounds are inside."""
        assert january.contains("2012-01-31T23:59:59.999999Z")
        assert not january.contains("2011-12-31T23:59:59Z")

    def test_zero_length_period_contains_its_instant(self) -> None:
        """A zero-length period contains exactly one instant."""
        p = Period("2012-01-01", "2012-01-01")

        assert p.contains("2012-01-01")
        assert not p.contains("2012-01-01T00:00:01")

    def test_contains_period(self) -> None:
        """A month is contained in its year, including the last one."""
        year = Period.from_year(2015)

        assert year.contains(Period.from_month(2015, 3))
        assert year.contains(Period.from_month(2015, 12))
        assert year.contains(year)

    def test_does_not_contain_partially_overlapping_period(self, january: Period) -> None:
        """Sticking out on either side means not contained."""
        assert not january.contains(Period("2011-12-15", "2012-01-15"))
        assert not january.contains(Period("2012-01-15", "2012-02-15"))

    def test_in_operator(self, january: Period) -> None:
        """'in' delegates to contains for instants and periods."""
        assert "2012-01-15" in january
        assert datetime(2012, 2, 1, tzinfo=UTC) not in january
        assert Period.from_day("2012-01-15") in january


class TestDurationComparison:
    """Tests for the length comparison predicates."""

    def test_shorter_and_longer(self) -> None:
        """February 2014 is shorter than March 2014."""
        february = Period.from_month(2014, 2)
        march = Period.from_month(2014, 3)

        assert february.duration_less_than(march)
        assert march.duration_greater_than(february)
        assert not february.duration_greater_than(march)
        assert not february.same_duration_as(march)

    def test_same_duration(self) -> None:
        """Two 31-day months last the same."""
        january = Period.from_month(2014, 1)
        march = Period.from_month(2014, 3)

        assert january.same_duration_as(march)
        assert not january.duration_less_than(march)
        assert not january.duration_greater_than(march)


class TestEquality:
    """Tests for value equality and hashing."""

    def test_equal_periods(self) -> None:
        """Periods with equal bounds are equal."""
        a = Period.from_month(2012, 1)
        b = Period.from_duration("2012-01-01", "1 MONTH")

        assert a == b
        assert a.same_value_as(b)
        assert not a != b

    def test_equality_across_offsets(self) -> None:
        """The same instants in different zones are the same period."""
        utc = Period("2014-05-01T00:00:00Z", "2014-05-02T00:00:00Z")
        local = Period("2014-05-01T03:00:00+03:00", "2014-05-02T03:00:00+03:00")

        assert utc == local
        assert local == utc
        assert hash(utc) == hash(local)

    def test_accessors_echo_original_offsets(self) -> None:
        """Equality ignores offsets but the accessors keep them."""
        local = Period("2014-05-01T03:00:00+03:00", "2014-05-02T03:00:00+03:00")

        assert local.start.utcoffset() == timedelta(hours=3)
        assert local.start.hour == 3

    def test_different_periods(self) -> None:
        """A different end makes a different period."""
        a = Period.from_month(2012, 1)

        assert a != a.move_end_date("1 DAY")
        assert not a.same_value_as(a.next())

    def test_not_equal_to_other_types(self) -> None:
        """Comparing to a non-period is simply unequal."""
        a = Period.from_month(2012, 1)

        assert a != "2012-01-01/2012-02-01"
        assert a != (a.start, a.end)

    def test_hashable_in_sets(self) -> None:
        """Equal periods collapse to one set element."""
        periods = {
            Period.from_month(2012, 1),
            Period.from_duration("2012-01-01", "1 MONTH"),
            Period.from_month(2012, 2),
        }

        assert len(periods) == 2
