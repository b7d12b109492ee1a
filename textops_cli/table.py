from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .cli_shared import OpError


@dataclass(frozen=True)
class CsvTable:
    headers: list[str]
    rows: list[list[str]]

    @property
    def width(self) -> int:
        return max([len(self.headers), *(len(r) for r in self.rows)])


def read_csv_block(stream: TextIO) -> str:
    """Collect lines until the first blank line or EOF."""
    lines: list[str] = []
    for line in stream:
        if not line.strip():
            break
        lines.append(line)
    return "".join(lines)


def parse_csv(text: str) -> CsvTable:
    try:
        # Blank lines come back as empty records; rows of empty fields are kept.
        records = [[field.strip() for field in rec] for rec in csv.reader(io.StringIO(text or "")) if rec]
    except csv.Error as e:
        raise OpError(f"invalid CSV: {e}") from e
    if not records:
        raise OpError("CSV has no headers")
    headers, rows = records[0], records[1:]
    if not rows:
        raise OpError("CSV has no data rows")
    return CsvTable(headers=headers, rows=rows)


def build_table(data: CsvTable) -> Table:
    width = data.width
    table = Table(show_lines=False)
    for header in data.headers + [""] * (width - len(data.headers)):
        table.add_column(Text(header), header_style="bold")
    for row in data.rows:
        table.add_row(*(Text(cell) for cell in row + [""] * (width - len(row))))
    return table


def render_table(data: CsvTable, console: Console | None = None) -> None:
    (console or Console()).print(build_table(data))
