"""Read and validate a word search puzzle from an XLSX workbook.

The workbook has a ``Grid`` sheet (one letter per cell, or one string per
row in column A) and a ``Words`` sheet (one word per row in column A, with an
optional header row).
"""

from __future__ import annotations

import sys
from pathlib import Path

import openpyxl

from models import Puzzle, WordSearchError

GRID_SHEET = "Grid"
WORDS_SHEET = "Words"
_WORD_HEADERS = {"WORD", "WORDS"}


def read_puzzle(path: str | Path) -> Puzzle:
    """Open *path*, read the grid and word list, validate and return a Puzzle."""
    path = Path(path)
    if not path.exists():
        raise WordSearchError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        for name in (GRID_SHEET, WORDS_SHEET):
            if name not in wb.sheetnames:
                raise WordSearchError(f"Missing sheet '{name}' in {path}")
        grid = _read_grid(wb[GRID_SHEET])
        words = _read_words(wb[WORDS_SHEET])
    finally:
        wb.close()

    _validate_grid(grid)
    return Puzzle(grid=tuple(grid), words=tuple(_validate_words(words, grid)))


def _read_grid(sheet) -> list[str]:
    """One string per non-empty row; a single long cell is taken as the row."""
    rows: list[str] = []
    for values in sheet.iter_rows(values_only=True):
        cells = [_cell_text(v) for v in values]
        while cells and not cells[-1]:
            cells.pop()
        if not cells:
            continue
        if len(cells) == 1:
            rows.append(_normalize_row(cells[0]))
        else:
            if any(len(c) != 1 for c in cells):
                raise WordSearchError(
                    f"Grid row {len(rows) + 1}: every cell must hold exactly one letter"
                )
            rows.append("".join(cells))
    return rows


def _read_words(sheet) -> list[str]:
    words: list[str] = []
    for i, values in enumerate(sheet.iter_rows(max_col=1, values_only=True)):
        word = _cell_text(values[0]) if values else ""
        if i == 0 and word.upper() in _WORD_HEADERS:
            continue
        words.append(word)
    return words


def _cell_text(value) -> str:
    return "" if value is None else str(value).strip()


def _normalize_row(raw: str) -> str:
    """Drop spaces so ``"C A T"`` and ``"CAT"`` read the same."""
    return "".join(raw.split())


def _validate_grid(grid: list[str]) -> None:
    if not grid or not grid[0]:
        raise WordSearchError("Grid is empty")
    width = len(grid[0])
    for r, row in enumerate(grid):
        if len(row) != width:
            raise WordSearchError(
                f"Grid is not rectangular: row {r + 1} has {len(row)} letters, expected {width}"
            )


def _validate_words(words: list[str], grid: list[str]) -> list[str]:
    """Drop spaces inside words, skip blanks and duplicates, warn about odd words."""
    longest = max(len(grid), len(grid[0]))
    seen: set[str] = set()
    result: list[str] = []

    for raw in words:
        word = _normalize_row(raw)
        if not word:
            continue
        if word != raw:
            print(f"Warning: '{raw}' read as '{word}' (spaces removed)", file=sys.stderr)
        if not word.isalpha():
            print(
                f"Warning: '{word}' contains characters other than letters",
                file=sys.stderr,
            )
        key = word.upper()
        if key in seen:
            print(f"Warning: duplicate word '{word}', skipping", file=sys.stderr)
            continue
        if len(word) > longest:
            print(
                f"Warning: '{word}' is longer than the {len(grid)}x{len(grid[0])} grid "
                f"and cannot be found",
                file=sys.stderr,
            )
        seen.add(key)
        result.append(word)

    if not result:
        raise WordSearchError("No words to search for")

    return result
