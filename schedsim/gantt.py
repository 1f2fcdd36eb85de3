from __future__ import annotations

from typing import List, Tuple

from rich.panel import Panel
from rich.text import Text

from .models import ScheduledSlice

PALETTE = ("red", "green", "yellow", "blue", "magenta", "cyan", "bright_black", "white")


def _columns(slices: List[ScheduledSlice]) -> List[Tuple[ScheduledSlice, int]]:
    """
    Pair each slice, in start order, with the chart column where it ends.
    One column per time unit; a slice is always at least one column wide.
    """
    placed = []
    column = 0
    for sl in sorted(slices, key=lambda s: (s.start_time, s.end_time)):
        column += max(1, sl.end_time - sl.start_time)
        placed.append((sl, column))
    return placed


def _label(pid: int, width: int) -> str:
    return f"P{pid}"[:width].ljust(width)


def time_marks(slices: List[ScheduledSlice]) -> str:
    """
    Time axis under the chart: each slice boundary's time printed at its
    column. Marks that would run into the next one are dropped, working
    back from the final completion time so that one is always shown.
    """
    marks = [(0, "0")] + [(column, str(sl.end_time)) for sl, column in _columns(slices)]

    kept: List[Tuple[int, str]] = []
    limit = None
    for column, text in reversed(marks):
        if limit is None or column + len(text) < limit:
            kept.append((column, text))
            limit = column

    line = ""
    for column, text in reversed(kept):
        line = line.ljust(column) + text
    return line


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart, one column per time unit.
    """
    if not slices:
        return "(no execution)"

    bar = "|"
    labels = " "
    for sl, column in _columns(slices):
        width = column - len(bar) + 1
        bar += "=" * (width - 1) + "|"
        labels += _label(sl.pid, width)

    return "\n".join(["Gantt Chart:", labels, bar, time_marks(slices)])


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Rich version of the chart: one colored block per slice with the pid
    beneath it. Colors are fixed per pid. Returns the panel and the time
    axis line to print under it.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    blocks = Text()
    labels = Text()
    start = 0
    for sl, column in _columns(slices):
        width = column - start
        blocks.append(" " * width, style=f"on {PALETTE[sl.pid % len(PALETTE)]}")
        labels.append(_label(sl.pid, width), style="bold")
        start = column

    chart = Text("\n").join([blocks, labels])
    return Panel.fit(chart, title="Gantt Chart"), time_marks(slices)
