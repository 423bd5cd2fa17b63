from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from .model import MergeResult

_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


def human_bytes(size: float) -> str:
    value = float(size)
    unit = _UNITS[0]
    for unit in _UNITS:
        if abs(value) < 1024 or unit == _UNITS[-1]:
            break
        value /= 1024

    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} {unit}"


def format_elapsed(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.3f}µs"


def build_summary_table(result: MergeResult) -> Table:
    table = Table(box=box.ROUNDED, show_lines=True)
    for header in (
        "Source",
        "Start",
        "Count",
        "Imported",
        "Pages",
        "Time Elapsed",
        "Max Memory",
        "Target File Size",
    ):
        table.add_column(header)

    config = result.config
    table.add_row(
        config.source_directory,
        str(config.start),
        str(config.count),
        str(len(result.imported)),
        str(result.page_count),
        format_elapsed(result.elapsed_s),
        human_bytes(result.peak_memory),
        human_bytes(result.target_size),
    )
    return table


def print_summary(result: MergeResult, *, console: Console | None = None) -> None:
    console = console or Console(width=100)
    print(f"Time elapsed is: {format_elapsed(result.elapsed_s)}")
    console.print(build_summary_table(result))
    print(f"Target File: {result.config.target}")
