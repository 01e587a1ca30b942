"""Tests for the Monday-start week helpers."""

import datetime

import pytest

from coachweek.scheduling.week import day_label, local_today, week_dates, week_start, weekday_name

MONDAY = datetime.date(2026, 3, 2)


class TestWeekStart:
    @pytest.mark.parametrize("offset", range(7))
    def test_every_day_of_the_week_maps_to_its_monday(self, offset):
        assert week_start(MONDAY + datetime.timedelta(days=offset)) == MONDAY

    def test_sunday_belongs_to_the_previous_monday(self):
        sunday = datetime.date(2026, 3, 8)
        assert week_start(sunday) == sunday - datetime.timedelta(days=6)

    def test_crosses_month_and_year_boundaries(self):
        assert week_start(datetime.date(2027, 1, 1)) == datetime.date(2026, 12, 28)


class TestWeekDates:
    @pytest.mark.parametrize("offset", range(0, 400, 13))
    def test_seven_consecutive_days_monday_to_sunday_containing_reference(self, offset):
        reference = datetime.date(2026, 1, 1) + datetime.timedelta(days=offset)
        dates = week_dates(reference)

        assert len(dates) == 7
        assert dates[0].weekday() == 0
        assert dates[-1].weekday() == 6
        assert reference in dates
        assert all(b - a == datetime.timedelta(days=1) for a, b in zip(dates, dates[1:]))


class TestLabels:
    def test_single_letter_labels(self):
        assert [day_label(d) for d in week_dates(MONDAY)] == ["M", "T", "W", "T", "F", "S", "S"]

    def test_weekday_names(self):
        assert weekday_name(MONDAY) == "Monday"
        assert weekday_name(datetime.date(2026, 3, 8)) == "Sunday"


def test_local_today_uses_the_given_timezone():
    # Kiritimati (UTC+14) and Pago Pago (UTC-11) are never on the same date
    assert local_today("Pacific/Kiritimati") != local_today("Pacific/Pago_Pago")
