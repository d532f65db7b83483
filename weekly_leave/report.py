#!/usr/bin/env python3
from typing import List, Optional

from .aggregator import WeeklySeries
from .weeks import WeekKey


def format_total(value: Optional[float]) -> str:
	if value is None:
		return ""
	if float(value).is_integer():
		return str(int(value))
	return repr(float(value))


def format_series_line(series: WeeklySeries) -> str:
	return ",".join(format_total(total) for total in series.totals)


def paste_instruction(first: WeekKey) -> str:
	return (
		f"Copy the following line and paste it into week {first.week} of {first.year} "
		f"and then \"Split text to columns\" to populate the cells"
	)


def render_report(series: WeeklySeries) -> List[str]:
	return [paste_instruction(series.first), format_series_line(series)]
