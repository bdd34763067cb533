"""Write a search trace to an XLSX file."""

from __future__ import annotations

from typing import Sequence

import openpyxl
from openpyxl.styles import Font

from models import EventKind, Puzzle, TraceEvent, format_path

TRACE_HEADERS = ("Step", "Event", "Word", "Row", "Col", "Index", "Direction", "Path")
SUMMARY_HEADERS = ("Word", "Found", "Path", "Events")


def write_trace_xlsx(
    puzzle: Puzzle,
    events: Sequence[TraceEvent],
    output_path: str,
) -> None:
    """Write the event log and a per-word summary to an Excel workbook.

    Sheet 'Trace' has one row per event, numbered from 1 so that row N is the
    event revealed by playback step N. Sheet 'Summary' lists every word with
    its found path (blank if not found) and how many events its search took.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Trace"

    header_font = Font(bold=True, size=12)
    for col, title in enumerate(TRACE_HEADERS, start=1):
        ws.cell(row=1, column=col, value=title).font = header_font

    for step, event in enumerate(events, start=1):
        ws.cell(row=step + 1, column=1, value=step)
        for col, value in enumerate(event.as_row(), start=2):
            ws.cell(row=step + 1, column=col, value=value)

    ws.freeze_panes = "A2"
    ws.column_dimensions["B"].width = 14
    ws.column_dimensions["C"].width = 18
    ws.column_dimensions["H"].width = 50

    # Summary sheet
    ws2 = wb.create_sheet(title="Summary")
    for col, title in enumerate(SUMMARY_HEADERS, start=1):
        ws2.cell(row=1, column=col, value=title).font = header_font

    found: dict[str, str] = {}
    counts: dict[str, int] = {}
    for event in events:
        counts[event.word] = counts.get(event.word, 0) + 1
        if event.kind == EventKind.FOUND:
            found[event.word] = format_path(event.path)

    row = 2
    for word in puzzle.words:
        if not word:
            continue
        ws2.cell(row=row, column=1, value=word)
        ws2.cell(row=row, column=2, value="yes" if word in found else "no")
        ws2.cell(row=row, column=3, value=found.get(word))
        ws2.cell(row=row, column=4, value=counts.get(word, 0))
        row += 1
    ws2.column_dimensions["A"].width = 18
    ws2.column_dimensions["C"].width = 50

    wb.save(output_path)
