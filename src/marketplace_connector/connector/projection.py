"""Row projection: select and reorder table columns to match a requested schema."""

from __future__ import annotations

from collections.abc import Sequence

from marketplace_connector.connector.csv_source import Table
from marketplace_connector.core.exceptions import SchemaMismatchError
from marketplace_connector.models.schema import DataRow, FieldSchema


def resolve_columns(table: Table, requested: Sequence[FieldSchema]) -> list[int]:
    """Source column index for each requested field, looked up by label.

    Raises:
        SchemaMismatchError: a requested label is not in the table header.
    """
    index = table.label_index()
    columns: list[int] = []
    for field in requested:
        try:
            columns.append(index[field.label])
        except KeyError:
            raise SchemaMismatchError(
                field.name,
                f"Column {field.label!r} ({field.name}) not found in dataset header",
            ) from None
    return columns


def project(table: Table, requested: Sequence[FieldSchema]) -> list[DataRow]:
    """One output row per data row, with exactly the requested columns in requested order."""
    columns = resolve_columns(table, requested)
    return [DataRow(values=[row[c] for c in columns]) for row in table.data_rows]


def select_fields(schema: Sequence[FieldSchema], names: Sequence[str]) -> list[FieldSchema]:
    """Schema entries for ``names`` (matched by synthetic name), in the order of ``names``."""
    by_name = {f.name: f for f in schema}
    selected: list[FieldSchema] = []
    for name in names:
        if name not in by_name:
            raise SchemaMismatchError(name)
        selected.append(by_name[name])
    return selected
