#!/usr/bin/env python3
"""CLI entry point for tracing a word search.

Reads a puzzle from XLSX, runs the step-trace search, and writes a PDF
(puzzle + solution), the trace as XLSX, and an SVG of the search state at a
chosen step. ``--play`` replays the trace to stderr at the chosen speed.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Sequence

from models import EventKind, Puzzle, TraceEvent, WordSearchError
from playback import SPEED_PRESETS


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Trace a brute-force word search and render its steps."
    )
    p.add_argument("input", help="Path to XLSX file with 'Grid' and 'Words' sheets")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output PDF path (default: input with .pdf extension)",
    )
    p.add_argument("--title", default="WORD SEARCH",
                   help='Title text (default: "WORD SEARCH")')
    p.add_argument("--step", type=int, default=None,
                   help="Render the SVG at this step (default: final step)")
    p.add_argument("--frames", type=int, default=None, metavar="K",
                   help="Also write an SVG frame every K steps")
    p.add_argument("--play", action="store_true",
                   help="Replay the trace on stderr")
    p.add_argument("--speed", default="medium",
                   help="Playback speed: slow, medium, fast or milliseconds per step "
                        "(default: medium)")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.frames is not None and args.frames < 1:
        parser.error("--frames must be at least 1")

    try:
        speed_ms = _parse_speed(args.speed)
    except ValueError:
        parser.error(f"invalid --speed: {args.speed!r}")

    t0 = time.time()
    try:
        _run(args, speed_ms, t0)
    except WordSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _parse_speed(value: str) -> int:
    if value in SPEED_PRESETS:
        return SPEED_PRESETS[value]
    ms = int(value)
    if ms < 0:
        raise ValueError(value)
    return ms


def _run(args, speed_ms: int, t0: float) -> None:
    from xlsx_reader import read_puzzle
    from trace_engine import trace
    from palette import color_map_for_words

    input_path = Path(args.input)
    output_path = args.output or str(input_path.with_suffix(".pdf"))

    puzzle = read_puzzle(input_path)
    print(
        f"Read {puzzle.rows}x{puzzle.cols} grid, {len(puzzle.words)} words",
        file=sys.stderr,
    )

    events = trace(puzzle.grid, puzzle.words)
    colors = color_map_for_words(list(puzzle.words))

    if args.play:
        _play(events, speed_ms)

    _output_all(puzzle, events, colors, args.title, output_path, args.step, args.frames)

    found = sum(1 for e in events if e.kind == EventKind.FOUND)
    elapsed = time.time() - t0
    print(
        f"Found {found}/{len(puzzle.words)} words in {len(events)} steps, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _output_all(
    puzzle: Puzzle,
    events: Sequence[TraceEvent],
    colors: dict[str, str],
    title: str,
    output_path: str,
    step: int | None,
    frames: int | None,
) -> None:
    """Write the PDF, trace XLSX, SVG frame(s) and solution SVG into an 'output' folder."""
    from pdf_renderer import render_pdf
    from replay import clamp_cursor
    from svg_renderer import render_frame_svg, render_solution_svg
    from xlsx_writer import write_trace_xlsx

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_trace.xlsx")
    svg_path = str(out_dir / f"{stem}.svg")
    solution_path = str(out_dir / f"{stem}_solution.svg")

    frame_step = clamp_cursor(events, len(events) if step is None else step)

    render_pdf(puzzle, events, title, pdf_path, colors=colors)
    write_trace_xlsx(puzzle, events, xlsx_path)
    render_frame_svg(puzzle, events, frame_step, colors, svg_path)
    render_solution_svg(puzzle, events, colors, solution_path)

    print(f"Output: {pdf_path}", file=sys.stderr)
    print(f"Output: {xlsx_path}", file=sys.stderr)
    print(f"Output: {svg_path} (step {frame_step}/{len(events)})", file=sys.stderr)
    print(f"Output: {solution_path}", file=sys.stderr)

    if frames:
        frame_dir = out_dir / f"{stem}_frames"
        frame_dir.mkdir(exist_ok=True)
        steps = list(range(0, len(events), frames))
        if not steps or steps[-1] != len(events):
            steps.append(len(events))
        width = len(str(len(events)))
        for s in steps:
            render_frame_svg(puzzle, events, s, colors, str(frame_dir / f"step_{s:0{width}d}.svg"))
        print(f"Output: {frame_dir} ({len(steps)} frames)", file=sys.stderr)


def _play(events: Sequence[TraceEvent], speed_ms: int) -> None:
    """Reveal events on stderr in real time, one per playback interval."""
    from playback import Playback
    from replay import ReplayState

    playback = Playback(total_steps=len(events), speed_ms=speed_ms)
    state = ReplayState()
    playback.start()

    last = time.monotonic()
    while playback.running:
        time.sleep(playback.interval_ms / 1000)
        now = time.monotonic()
        revealed = playback.tick((now - last) * 1000)
        last = now
        for i in revealed:
            state.apply(events[i])
            print(f"[{i + 1}/{len(events)}] {events[i].describe()}", file=sys.stderr)

    print(f"Playback done: {len(state.found)} words found", file=sys.stderr)


if __name__ == "__main__":
    main()
