"""Shared fixtures: small puzzles and XLSX workbooks built on the fly."""

import openpyxl
import pytest

from models import Puzzle

SAMPLE_GRID = (
    "CATX",
    "OXOX",
    "WDOG",
    "XXXX",
)
SAMPLE_WORDS = ("CAT", "DOG", "COW", "BIRD")


def write_puzzle_xlsx(path, grid_rows, words, word_header=True, split_cells=True):
    """Write a puzzle workbook with 'Grid' and 'Words' sheets."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Grid"
    for r, row in enumerate(grid_rows, start=1):
        if split_cells:
            for c, ch in enumerate(row, start=1):
                ws.cell(row=r, column=c, value=ch)
        else:
            ws.cell(row=r, column=1, value=row)

    ws2 = wb.create_sheet(title="Words")
    start = 1
    if word_header:
        ws2.cell(row=1, column=1, value="Word")
        start = 2
    for i, word in enumerate(words, start=start):
        ws2.cell(row=i, column=1, value=word)

    wb.save(path)
    return path


@pytest.fixture
def sample_puzzle():
    return Puzzle(grid=SAMPLE_GRID, words=SAMPLE_WORDS)


@pytest.fixture
def sample_xlsx(tmp_path):
    return write_puzzle_xlsx(tmp_path / "puzzle.xlsx", SAMPLE_GRID, SAMPLE_WORDS)
