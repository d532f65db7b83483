#!/usr/bin/env python3
"""
Spreadsheet reader for leave workbooks.
Yields the first-column text of every row on every sheet, in sheet order then row order.
- .xlsx / .xlsm are read with openpyxl (cached values, not formulas)
- .xls is read with xlrd, which also handles legacy codepage translation
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterator, Optional

import xlrd
from openpyxl import load_workbook

OPENPYXL_SUFFIXES = (".xlsx", ".xlsm")
XLRD_SUFFIXES = (".xls",)

CELL_DATE_FORMAT = "%d/%m/%Y"


def cell_to_text(value: Any) -> Optional[str]:
	"""Render a cell value as the text a user would have typed, or None for an empty cell."""
	if value is None:
		return None
	if isinstance(value, (datetime, date)):
		return value.strftime(CELL_DATE_FORMAT)
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	text = str(value)
	return text if text.strip() else None


class LeaveSheetReader:
	"""Read the leave column from an Excel workbook."""

	def __init__(self, excel_file_path: str):
		self.excel_file_path = Path(excel_file_path)
		self.workbook = None
		if not self.excel_file_path.exists():
			raise FileNotFoundError(f"Excel file not found: {excel_file_path}")
		self.suffix = self.excel_file_path.suffix.lower()
		if self.suffix not in OPENPYXL_SUFFIXES + XLRD_SUFFIXES:
			raise ValueError(f"Unsupported file type: {self.excel_file_path.name}")

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		if self.suffix in XLRD_SUFFIXES:
			self.workbook = xlrd.open_workbook(str(self.excel_file_path), on_demand=True)
		else:
			self.workbook = load_workbook(filename=str(self.excel_file_path), data_only=True, read_only=True)

	def close_workbook(self) -> None:
		if self.workbook is None:
			return
		if self.suffix in XLRD_SUFFIXES:
			self.workbook.release_resources()
		else:
			self.workbook.close()
		self.workbook = None

	def iter_first_column(self) -> Iterator[str]:
		if self.workbook is None:
			raise RuntimeError("Workbook is not open; use LeaveSheetReader as a context manager")
		raw = self._iter_xlrd() if self.suffix in XLRD_SUFFIXES else self._iter_openpyxl()
		for value in raw:
			text = cell_to_text(value)
			if text is not None:
				yield text

	def _iter_openpyxl(self) -> Iterator[Any]:
		for ws in self.workbook.worksheets:
			for row in ws.iter_rows(min_col=1, max_col=1, values_only=True):
				yield row[0] if row else None

	def _iter_xlrd(self) -> Iterator[Any]:
		for index in range(self.workbook.nsheets):
			sheet = self.workbook.sheet_by_index(index)
			if sheet.ncols == 0:
				continue
			for cell in sheet.col(0):
				if cell.ctype == xlrd.XL_CELL_DATE:
					yield xlrd.xldate.xldate_as_datetime(cell.value, self.workbook.datemode)
				elif cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
					yield None
				else:
					yield cell.value
