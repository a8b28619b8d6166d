"""Bordered text tables and console titles."""

from __future__ import annotations

import enum
import re
import sys
import textwrap
from collections.abc import Iterable, Sequence
from typing import Any, Protocol, TextIO

_NUMBER = re.compile(r"^-?(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?$")
_PERCENT = re.compile(r"^-?\d+\.?\d*%$")


class TableConverter(Protocol):
    def rows(self) -> list[list[str]]: ...

    def header(self) -> list[str]: ...


class Alignment(enum.Enum):
    DEFAULT = "default"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def _is_num_or_space(char: str) -> bool:
    return char.isdigit() or char == " "


def _title(name: str) -> str:
    chars = list(name)
    for index, char in enumerate(chars):
        if char == "_":
            chars[index] = " "
        elif char == "." and (
            (index != 0 and not _is_num_or_space(chars[index - 1]))
            or (index != len(chars) - 1 and not _is_num_or_space(chars[index + 1]))
        ):
            chars[index] = " "
    result = "".join(chars).strip()
    if not result and name:
        result = " "
    return result.upper()


def _align(text: str, width: int, alignment: Alignment) -> str:
    if alignment is Alignment.DEFAULT:
        stripped = text.strip()
        numeric = bool(_NUMBER.match(stripped) or _PERCENT.match(stripped))
        alignment = Alignment.RIGHT if numeric else Alignment.LEFT
    if alignment is Alignment.RIGHT:
        return text.rjust(width)
    if alignment is Alignment.CENTER:
        return text.center(width)
    return text.ljust(width)


class TextTable:
    """A table of text cells rendered with configurable separators."""

    def __init__(self, header: Sequence[Any] = ()) -> None:
        self.header = [str(cell) for cell in header]
        self.rows: list[list[str]] = []
        self.border = True
        self.header_line = True
        self.row_line = False
        self.column_separator = "|"
        self.row_separator = "-"
        self.center_separator = "+"
        self.auto_wrap_text = True
        self.auto_format_headers = True
        self.header_alignment = Alignment.CENTER
        self.alignment = Alignment.DEFAULT
        self.wrap_width = 30

    def append(self, row: Sequence[Any]) -> None:
        self.rows.append([str(cell) for cell in row])

    def append_bulk(self, rows: Iterable[Sequence[Any]]) -> None:
        for row in rows:
            self.append(row)

    def render(self, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        header = [
            (_title(cell) if self.auto_format_headers else cell).split("\n")
            for cell in self.header
        ]
        body = [[self._cell_lines(cell) for cell in row] for row in self.rows]

        column_count = max([len(header), *(len(row) for row in body)])
        widths = [0] * column_count
        for row in [header, *body]:
            for index, lines in enumerate(row):
                widths[index] = max([widths[index], *(len(line) for line in lines)])

        separator = self._separator_line(widths)
        if self.border:
            out.write(separator + "\n")
        if header:
            self._write_row(out, header, widths, self.header_alignment)
            if self.header_line:
                out.write(separator + "\n")
        for row in body:
            self._write_row(out, row, widths, self.alignment)
            if self.row_line:
                out.write(separator + "\n")
        if self.border and not self.row_line:
            out.write(separator + "\n")

    def _cell_lines(self, text: str) -> list[str]:
        lines: list[str] = []
        for part in text.split("\n"):
            if self.auto_wrap_text and len(part) > self.wrap_width:
                lines.extend(
                    textwrap.wrap(part, self.wrap_width, break_long_words=False) or [""]
                )
            else:
                lines.append(part)
        return lines

    def _separator_line(self, widths: Sequence[int]) -> str:
        return self.center_separator + "".join(
            self.row_separator * (width + 2) + self.center_separator for width in widths
        )

    def _write_row(
        self,
        out: TextIO,
        cells: Sequence[list[str]],
        widths: Sequence[int],
        alignment: Alignment,
    ) -> None:
        height = max((len(lines) for lines in cells), default=1)
        edge = self.column_separator if self.border else " "
        for line_index in range(height):
            parts = []
            for column, width in enumerate(widths):
                lines = cells[column] if column < len(cells) else []
                text = lines[line_index] if line_index < len(lines) else ""
                parts.append(" " + _align(text, width, alignment) + " ")
            closing = self.column_separator if self.border else ""
            out.write(edge + self.column_separator.join(parts) + closing + "\n")


def render_table(converter: TableConverter, file: TextIO | None = None) -> None:
    """Render the header and rows of ``converter`` as a separated table."""
    table = create_table_with_column_separator(converter.header())
    table.append_bulk(converter.rows())
    table.render(file)


def create_standard_table(header: Sequence[Any]) -> TextTable:
    table = TextTable(header)
    table.border = False
    table.header_alignment = Alignment.LEFT
    table.row_line = False
    table.header_line = True
    table.center_separator = ""
    table.column_separator = ""
    table.row_separator = "-"
    return table


def create_table_with_column_separator(header: Sequence[Any]) -> TextTable:
    table = create_standard_table(header)
    table.auto_wrap_text = False
    table.center_separator = "+"
    table.column_separator = "|"
    return table


def create_table_with_column_and_row_separator(header: Sequence[Any]) -> TextTable:
    table = create_standard_table(header)
    table.row_line = True
    table.border = True
    table.center_separator = "+"
    table.column_separator = "|"
    return table


def print_console_title(title: str) -> None:
    print(f"\n\n{console_title(title)}\n\n")


def console_title(title: str) -> str:
    """Upper-cased title padded with spaces to 50 characters."""
    return pad_right(title.upper(), " ", 50)


def pad_right(text: str, pad: str, length: int) -> str:
    """Append ``pad`` until longer than ``length``, then cut to ``length``."""
    if not pad:
        raise ValueError("pad must not be empty")
    result = text + pad
    while len(result) <= length:
        result += pad
    return result[:length]


def sequence(text: str, pad: str, length: int) -> str:
    """``pad`` repeated once for every character ``text`` falls short of ``length``."""
    return pad * max(0, length - len(text))