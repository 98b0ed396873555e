"""Raw table source: turns a Marketplace CSV export body into a Table."""

from __future__ import annotations

import csv
import io
import re
from collections.abc import Sequence

from marketplace_connector.core.exceptions import CsvParseError
from marketplace_connector.core.types import RawTable, Row

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class Table:
    """Immutable 2-D string table. Row 0 is the header, rows 1..N are data."""

    __slots__ = ("_header", "_data_rows")

    def __init__(self, rows: Sequence[Sequence[str]]) -> None:
        if not rows:
            raise CsvParseError("Table has no header row")
        header = tuple(rows[0])
        data_rows = tuple(tuple(r) for r in rows[1:])
        for i, row in enumerate(data_rows, start=1):
            if len(row) != len(header):
                raise CsvParseError(
                    f"Row {i} has {len(row)} cells, header has {len(header)}"
                )
        self._header = header
        self._data_rows = data_rows

    @property
    def header(self) -> tuple[str, ...]:
        return self._header

    @property
    def data_rows(self) -> tuple[tuple[str, ...], ...]:
        return self._data_rows

    @property
    def first_data_row(self) -> tuple[str, ...] | None:
        return self._data_rows[0] if self._data_rows else None

    def __len__(self) -> int:
        return 1 + len(self._data_rows)

    def label_index(self) -> dict[str, int]:
        """Map header label to column index. The first occurrence of a duplicated label wins."""
        index: dict[str, int] = {}
        for i, label in enumerate(self._header):
            index.setdefault(label, i)
        return index

    def to_rows(self) -> RawTable:
        return [list(self._header), *(list(r) for r in self._data_rows)]


def flatten_line_breaks(cell: str) -> str:
    """Replace every line break in a cell with a single space."""
    return _LINE_BREAK.sub(" ", cell)


def parse_rows(text: str) -> RawTable:
    """Split CSV text into rows of single-line string cells, skipping blank lines.

    Quoted fields may span lines in the raw text; their line breaks become spaces.
    """
    try:
        rows: list[Row] = [
            [flatten_line_breaks(cell) for cell in row]
            for row in csv.reader(io.StringIO(text, newline=""), strict=True)
            if row
        ]
    except csv.Error as exc:
        raise CsvParseError(f"Unexpected CSV parsing exception: {exc}") from exc
    return rows


def parse_table(text: str) -> Table:
    """Parse a CSV export body into a :class:`Table`."""
    return Table(parse_rows(text))

