"""A minimal fluent table printer with padded columns."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Any, TextIO

Formatter = Callable[[str], str]
WidthFunc = Callable[[str], int]

DEFAULT_PADDING = 2
DEFAULT_WRITER: TextIO | None = None
DEFAULT_HEADER_FORMATTER: Formatter | None = None
DEFAULT_FIRST_COLUMN_FORMATTER: Formatter | None = None
DEFAULT_WIDTH_FUNC: WidthFunc = len


class Table:
    """Rows of text printed in columns padded to the widest cell.

    The number of columns is fixed by the headers given at construction.
    Rows with fewer values get empty cells; extra values are dropped.
    """

    def __init__(self, *headers: Any) -> None:
        self.header = [str(header) for header in headers]
        self.rows: list[list[str]] = []
        self.padding = 0
        self.writer: TextIO | None = None
        self.header_formatter: Formatter | None = None
        self.first_column_formatter: Formatter | None = None
        self.width_func: WidthFunc = len

        self.with_padding(DEFAULT_PADDING)
        self.with_writer(DEFAULT_WRITER)
        self.with_header_formatter(DEFAULT_HEADER_FORMATTER)
        self.with_first_column_formatter(DEFAULT_FIRST_COLUMN_FORMATTER)
        self.with_width_func(DEFAULT_WIDTH_FUNC)

    def with_header_formatter(self, formatter: Formatter | None) -> Table:
        """Formatter applied to the whole padded header line."""
        self.header_formatter = formatter
        return self

    def with_first_column_formatter(self, formatter: Formatter | None) -> Table:
        """Formatter applied to the padded first cell of every row."""
        self.first_column_formatter = formatter
        return self

    def with_padding(self, padding: int) -> Table:
        self.padding = max(padding, 0)
        return self

    def with_writer(self, writer: TextIO | None) -> Table:
        """Output stream; None means standard output at print time."""
        self.writer = writer
        return self

    def with_width_func(self, func: WidthFunc) -> Table:
        self.width_func = func
        return self

    def add_row(self, *args: Any) -> Table:
        cells = [str(value) for value in args[: len(self.header)]]
        cells.extend("" for _ in range(len(self.header) - len(cells)))
        self.rows.append(cells)
        return self

    def print(self) -> None:
        out = self.writer if self.writer is not None else sys.stdout
        widths = self._widths()

        header_line = "".join(self._pad_cells(self.header, widths))
        if self.header_formatter is not None:
            header_line = self.header_formatter(header_line)
        out.write(header_line + "\n")

        for row in self.rows:
            cells = self._pad_cells(row, widths)
            if cells and self.first_column_formatter is not None:
                cells[0] = self.first_column_formatter(cells[0])
            out.write("".join(cells) + "\n")

    def _widths(self) -> list[int]:
        widths = [0] * len(self.header)
        for row in [*self.rows, self.header]:
            widths = [
                max(current, self.width_func(cell) + self.padding)
                for current, cell in zip(widths, row)
            ]
        return widths

    def _pad_cells(self, row: Sequence[str], widths: Sequence[int]) -> list[str]:
        return [
            cell + " " * max(0, width - self.width_func(cell))
            for cell, width in zip(row, widths)
        ]