#!/usr/bin/env python3
"""
Command-line interface for the weekly_leave package.
Usage:
  python -m weekly_leave <excel_file>
"""

import argparse
from typing import List, Optional

from .aggregator import summarise_cells
from .reader import LeaveSheetReader
from .report import render_report


def main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(description='Summarise leave dates from a spreadsheet into weekly totals')
	parser.add_argument('excel_file', help='Path to Excel file with leave dates in the first column')
	args = parser.parse_args(argv)

	try:
		with LeaveSheetReader(args.excel_file) as reader:
			series = summarise_cells(reader.iter_first_column())
	except (FileNotFoundError, ValueError) as e:
		raise SystemExit(f"Error: {e}")

	for line in render_report(series):
		print(line)


if __name__ == "__main__":
	main()
