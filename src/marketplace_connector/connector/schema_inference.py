"""Schema inference from a table's header and first data row."""

from __future__ import annotations

import math

from marketplace_connector.connector.csv_source import Table
from marketplace_connector.core.exceptions import SchemaUnavailableError
from marketplace_connector.models.schema import DataType, FieldSchema, Semantics


def field_name(index: int) -> str:
    return f"c{index}"


def is_numeric(value: str) -> bool:
    """True when the whole of ``value`` is a finite decimal number.

    Blank strings, digit-group underscores and nan/inf spellings are text.
    """
    stripped = value.strip()
    if not stripped or "_" in stripped:
        return False
    try:
        number = float(stripped)
    except ValueError:
        return False
    return math.isfinite(number)


def infer_field(index: int, label: str, sample: str) -> FieldSchema:
    if is_numeric(sample):
        return FieldSchema(
            name=field_name(index),
            label=label,
            data_type=DataType.NUMBER,
            semantics=Semantics.metric(),
        )
    return FieldSchema(
        name=field_name(index),
        label=label,
        data_type=DataType.STRING,
        semantics=Semantics.dimension(),
    )


def infer_schema(table: Table) -> list[FieldSchema]:
    """Build one FieldSchema per header column, in header order.

    Only the first data row is sampled: a column whose first value is numeric
    is a reaggregatable metric regardless of later rows.
    """
    sample_row = table.first_data_row
    if sample_row is None:
        raise SchemaUnavailableError("Cannot infer a schema from a table without data rows")
    return [
        infer_field(i, label, sample_row[i])
        for i, label in enumerate(table.header)
        if i < len(sample_row)
    ]
