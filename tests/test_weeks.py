from datetime import date

import pytest

from weekly_leave.weeks import WeekKey, weeks_in_year


def test_weeks_in_year_handles_long_and_short_years():
	assert weeks_in_year(2020) == 53
	assert weeks_in_year(2015) == 53
	assert weeks_in_year(2024) == 52
	assert weeks_in_year(2023) == 52


def test_from_date_uses_iso_year_at_boundaries():
	assert WeekKey.from_date(date(2024, 1, 1)) == WeekKey(2024, 1)
	assert WeekKey.from_date(date(2024, 12, 30)) == WeekKey(2025, 1)
	assert WeekKey.from_date(date(2021, 1, 1)) == WeekKey(2020, 53)


def test_ordering_is_year_then_week():
	assert WeekKey(2023, 52) < WeekKey(2024, 1)
	assert WeekKey(2024, 2) < WeekKey(2024, 10)
	assert sorted([WeekKey(2025, 1), WeekKey(2024, 30), WeekKey(2024, 3)]) == [
		WeekKey(2024, 3),
		WeekKey(2024, 30),
		WeekKey(2025, 1),
	]


@pytest.mark.parametrize("year", [2015, 2020, 2023, 2024, 2026])
def test_next_walks_every_week_of_the_year_then_rolls_over(year):
	week = WeekKey(year, 1)
	seen = []
	while week.year == year:
		seen.append(week.week)
		week = week.next()
	assert seen == list(range(1, weeks_in_year(year) + 1))
	assert week == WeekKey(year + 1, 1)


def test_next_rolls_over_after_week_53():
	assert WeekKey(2020, 52).next() == WeekKey(2020, 53)
	assert WeekKey(2020, 53).next() == WeekKey(2021, 1)


def test_until_is_inclusive_across_years():
	weeks = list(WeekKey(2020, 52).until(WeekKey(2021, 2)))
	assert weeks == [WeekKey(2020, 52), WeekKey(2020, 53), WeekKey(2021, 1), WeekKey(2021, 2)]


def test_until_same_week_yields_it_once():
	assert list(WeekKey(2024, 5).until(WeekKey(2024, 5))) == [WeekKey(2024, 5)]


def test_until_rejects_reversed_bounds():
	with pytest.raises(ValueError):
		WeekKey(2024, 3).until(WeekKey(2024, 1))


def test_str_names_week_and_year():
	assert str(WeekKey(2024, 7)) == "week 7 of 2024"
