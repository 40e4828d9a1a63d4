# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Column-aligned plain-text tables rendered with Rich."""

from __future__ import annotations

import io
from typing import TextIO

from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text


class ColumnPrinter:
    """Collects values per named column and prints them as aligned text.

    Columns print in the order they were added. Columns shorter than the
    longest one are padded with empty cells. Values are printed literally
    (no Rich markup) and never wrapped. Tabs are expanded and line breaks
    become spaces, so each row prints on exactly one line.
    """

    def __init__(self, padding: int = 2, show_header: bool = True) -> None:
        self._padding = padding
        self._show_header = show_header
        self._columns: dict[str, list[str]] = {}

    def add_column(self, name: str) -> None:
        self._columns.setdefault(name, [])

    def add_value(self, column: str, value: str) -> None:
        if column not in self._columns:
            raise KeyError(f"Unknown column '{column}'")
        self._columns[column].append(_single_line(value))

    @property
    def columns(self) -> list[str]:
        return list(self._columns)

    def rows(self) -> list[list[str]]:
        height = max((len(values) for values in self._columns.values()), default=0)
        return [
            [values[i] if i < len(values) else "" for values in self._columns.values()]
            for i in range(height)
        ]

    def print(self, out: TextIO) -> None:
        """Write the table to *out*, one line per row, and flush."""
        if not self._columns:
            out.flush()
            return

        table = Table(
            box=None,
            show_header=self._show_header,
            show_edge=False,
            pad_edge=False,
            padding=(0, self._padding),
            collapse_padding=True,
        )
        for name in self._columns:
            table.add_column(Text(name), no_wrap=True)
        for row in self.rows():
            table.add_row(*(Text(value) for value in row))

        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=self._required_width(),
            color_system=None,
            force_terminal=False,
            force_jupyter=False,
            highlight=False,
            soft_wrap=False,
        )
        console.print(table)

        for line in buffer.getvalue().splitlines():
            out.write(line.rstrip() + "\n")
        out.flush()

    def _required_width(self) -> int:
        widths = []
        for name, values in self._columns.items():
            cells = [*values, name] if self._show_header else values
            widths.append(max((cell_len(v) for v in cells), default=0))
        return sum(widths) + self._padding * len(widths) + 1


def _single_line(value: str) -> str:
    return " ".join(value.expandtabs().splitlines())
