import sys
from pathlib import Path

import pytest
from openpyxl import Workbook

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
	sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture
def make_workbook(tmp_path):
	"""Write an .xlsx whose sheets hold the given first-column values."""

	def _make(sheets, name="leave.xlsx"):
		wb = Workbook()
		wb.remove(wb.active)
		for title, values in sheets.items():
			ws = wb.create_sheet(title)
			for value in values:
				ws.append([value])
		path = tmp_path / name
		wb.save(path)
		return path

	return _make
