#!/usr/bin/env python3
"""
Weekly aggregation of leave observations.
Totals leave per ISO week and lays the totals out as a dense run of weeks from
the first week with leave to the last, leaving weeks without leave empty.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .parser import LeaveObservation, parse_leave_cells
from .weeks import WeekKey


class NoLeaveDataError(ValueError):
	"""Raised when there is no leave to summarise."""


@dataclass(frozen=True)
class WeeklySeries:
	first: WeekKey
	last: WeekKey
	totals: List[Optional[float]]


def group_by_week(observations: Iterable[LeaveObservation]) -> Dict[WeekKey, float]:
	totals: Dict[WeekKey, float] = defaultdict(float)
	for observation in observations:
		totals[observation.week] += observation.amount
	return dict(totals)


def build_weekly_series(observations: Iterable[LeaveObservation]) -> WeeklySeries:
	"""
	Sum leave per week and fill the gaps between the earliest and latest week.

	Raises:
		NoLeaveDataError: if there are no observations at all
	"""
	totals = group_by_week(observations)
	if not totals:
		raise NoLeaveDataError("No leave entries found, nothing to summarise")

	weeks = sorted(totals)
	first, last = weeks[0], weeks[-1]
	return WeeklySeries(first=first, last=last, totals=[totals.get(week) for week in first.until(last)])


def summarise_cells(cells: Iterable[str]) -> WeeklySeries:
	return build_weekly_series(parse_leave_cells(cells))
