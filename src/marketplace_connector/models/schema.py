"""Field schema and response models exchanged with the reporting host.

Field names follow the host's camelCase wire format through aliases, so
``model_dump(by_alias=True)`` yields exactly what the host expects.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DataType(StrEnum):
    NUMBER = "NUMBER"
    STRING = "STRING"


class ConceptType(StrEnum):
    METRIC = "METRIC"
    DIMENSION = "DIMENSION"


class Semantics(BaseModel):
    """Aggregation semantics of a field."""

    model_config = ConfigDict(populate_by_name=True)

    concept_type: ConceptType = Field(alias="conceptType")
    is_reaggregatable: Optional[bool] = Field(default=None, alias="isReaggregatable")

    @classmethod
    def metric(cls) -> Semantics:
        return cls(concept_type=ConceptType.METRIC, is_reaggregatable=True)

    @classmethod
    def dimension(cls) -> Semantics:
        return cls(concept_type=ConceptType.DIMENSION)


class FieldSchema(BaseModel):
    """One column of a dataset.

    ``name`` is the synthetic positional identifier (``c0``, ``c1``, ...);
    ``label`` is the original header text.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    label: str
    data_type: DataType = Field(alias="dataType")
    semantics: Semantics

    def to_host(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class DataRow(BaseModel):
    values: list[str]


class GetSchemaResponse(BaseModel):
    schema_: list[FieldSchema] = Field(alias="schema")

    model_config = ConfigDict(populate_by_name=True)

    def to_host(self) -> dict:
        return {"schema": [f.to_host() for f in self.schema_]}


class GetDataResponse(BaseModel):
    schema_: list[FieldSchema] = Field(alias="schema")
    rows: list[DataRow]

    model_config = ConfigDict(populate_by_name=True)

    def to_host(self) -> dict:
        return {
            "schema": [f.to_host() for f in self.schema_],
            "rows": [r.model_dump() for r in self.rows],
        }
