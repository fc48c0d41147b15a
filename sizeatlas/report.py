from __future__ import annotations
import time
from typing import List, Optional

import click

from .models import AggregateTotals, FileRecord, ScanResult, SizeUnit
from .utils import format_elapsed, format_size

PROGRESS_INTERVAL = 0.10  # сек между перерисовками счётчика

def file_line(rec: FileRecord, unit: SizeUnit) -> str:
    return f"{click.style(rec.path, fg='yellow')}   {format_size(rec.size, unit)}"

def total_lines(totals: AggregateTotals, unit: SizeUnit) -> List[str]:
    return [
        "-- Total --",
        click.style(f"Files number: {totals.files}", fg="blue"),
        click.style(f"Total size:   {format_size(totals.total_bytes, unit)}", fg="blue"),
        click.style(f"Total time:   {format_elapsed(totals.elapsed_sec)}", fg="blue"),
    ]

def print_report(result: ScanResult, unit: SizeUnit, color: Optional[bool] = None):
    for rec in result.records:
        click.echo(file_line(rec, unit), color=color)
    for line in total_lines(result.totals, unit):
        click.echo(line, color=color)


class ProgressCounter:
    """Live "Files read: N" counter on stderr, redrawn in place."""

    def __init__(self, interval: float = PROGRESS_INTERVAL):
        self.interval = interval
        self.files = 0
        self._last_emit: Optional[float] = None
        self._drawn = False

    def __call__(self, cur: str, files: int, total_bytes: int):
        self.files = files
        now = time.monotonic()
        if self._last_emit is None or now - self._last_emit >= self.interval:
            self._last_emit = now
            self._draw()

    def _draw(self):
        click.echo(f"\rFiles read: {self.files}", nl=False, err=True)
        self._drawn = True

    def finish(self):
        if not self._drawn:
            return
        # Финальное значение + перевод строки, чтобы отчёт начинался с новой строки.
        self._draw()
        click.echo("", err=True)
