#!/usr/bin/env python3
"""
Leave cell parser.
Classifies the text of a single spreadsheet cell as a full day, a half day or a
range of days, and expands it into dated leave observations.

Recognised forms, checked in this order:
  DD/MM/YYYY                  one full day
  DD/MM/YYYY am|pm            one half day
  DD/MM/YYYY - DD/MM/YYYY     every weekday from start to end inclusive
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, List, Union

from .weeks import WeekKey

DATE_FORMAT = "%d/%m/%Y"
FULL_DAY_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII)
HALF_DAY_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4} (am|pm)", re.ASCII)
DAY_RANGE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4} - \d{2}/\d{2}/\d{4}", re.ASCII)

FULL_DAY = 1.0
HALF_DAY = 0.5

# Saturday, Sunday
WEEKEND = (5, 6)


@dataclass(frozen=True)
class LeaveObservation:
	date: date
	amount: float
	week: WeekKey = field(init=False, compare=False, repr=False)

	def __post_init__(self):
		object.__setattr__(self, "week", WeekKey.from_date(self.date))


@dataclass(frozen=True)
class FullDay:
	date: date


@dataclass(frozen=True)
class HalfDay:
	date: date


@dataclass(frozen=True)
class DayRange:
	start: date
	end: date


@dataclass(frozen=True)
class Unrecognized:
	text: str
	reason: str = "unrecognised format"


LeaveEntry = Union[FullDay, HalfDay, DayRange, Unrecognized]


def _parse_date(text: str) -> date:
	return datetime.strptime(text, DATE_FORMAT).date()


def classify_cell(text: str) -> LeaveEntry:
	"""Decide which kind of leave entry a cell holds."""
	try:
		if FULL_DAY_PATTERN.fullmatch(text):
			return FullDay(_parse_date(text))
		if HALF_DAY_PATTERN.fullmatch(text):
			return HalfDay(_parse_date(text[:10]))
		if DAY_RANGE_PATTERN.fullmatch(text):
			start, end = _parse_date(text[:10]), _parse_date(text[13:23])
			if start > end:
				return Unrecognized(text, "range ends before it starts")
			return DayRange(start, end)
	except ValueError as e:
		return Unrecognized(text, str(e))
	return Unrecognized(text)


def _weekdays_between(start: date, end: date) -> Iterator[date]:
	for offset in range((end - start).days + 1):
		current = start + timedelta(days=offset)
		if current.weekday() not in WEEKEND:
			yield current


def expand_entry(entry: LeaveEntry) -> List[LeaveObservation]:
	if isinstance(entry, FullDay):
		return [LeaveObservation(entry.date, FULL_DAY)]
	if isinstance(entry, HalfDay):
		return [LeaveObservation(entry.date, HALF_DAY)]
	if isinstance(entry, DayRange):
		return [LeaveObservation(day, FULL_DAY) for day in _weekdays_between(entry.start, entry.end)]
	return []


def parse_leave_cell(text: str) -> List[LeaveObservation]:
	"""
	Turn one cell into leave observations.
	Cells that cannot be understood are reported and produce nothing.
	"""
	entry = classify_cell(text)
	if isinstance(entry, Unrecognized):
		print(f"Failed to parse cell containing '{entry.text}'")
		return []
	return expand_entry(entry)


def parse_leave_cells(cells: Iterable[str]) -> Iterator[LeaveObservation]:
	for text in cells:
		yield from parse_leave_cell(text)
