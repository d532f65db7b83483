#!/usr/bin/env python3
"""
ISO-8601 week keys used to bucket leave.
A WeekKey orders by year then week and can step forward one week at a time,
rolling over into week 1 of the next year after the year's last ISO week.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator


def weeks_in_year(year: int) -> int:
	"""Number of ISO weeks (52 or 53) in the given ISO year."""
	# 28 December always falls in the last ISO week of its year
	return date(year, 12, 28).isocalendar()[1]


@dataclass(frozen=True, order=True)
class WeekKey:
	"""An ISO (year, week) pair."""

	year: int
	week: int

	@classmethod
	def from_date(cls, day: date) -> "WeekKey":
		iso_year, iso_week, _ = day.isocalendar()
		return cls(year=iso_year, week=iso_week)

	def next(self) -> "WeekKey":
		if self.week == weeks_in_year(self.year):
			return WeekKey(year=self.year + 1, week=1)
		return WeekKey(year=self.year, week=self.week + 1)

	def until(self, end: "WeekKey") -> Iterator["WeekKey"]:
		"""
		Yield every week from this one up to and including end.

		Raises:
			ValueError: if end comes before this week
		"""
		if self > end:
			raise ValueError(f"Cannot iterate backwards from {self} to {end}")
		return self._walk(end)

	def _walk(self, end: "WeekKey") -> Iterator["WeekKey"]:
		current = self
		while current < end:
			yield current
			current = current.next()
		yield end

	def __str__(self) -> str:
		return f"week {self.week} of {self.year}"
