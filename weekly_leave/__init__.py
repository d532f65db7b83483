from .aggregator import NoLeaveDataError, WeeklySeries, build_weekly_series, summarise_cells
from .parser import LeaveObservation, classify_cell, parse_leave_cell
from .reader import LeaveSheetReader
from .weeks import WeekKey

__all__ = [
	"LeaveObservation",
	"LeaveSheetReader",
	"NoLeaveDataError",
	"WeekKey",
	"WeeklySeries",
	"build_weekly_series",
	"classify_cell",
	"parse_leave_cell",
	"summarise_cells",
]

__version__ = "0.1.0"
