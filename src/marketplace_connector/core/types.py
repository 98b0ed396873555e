"""Type aliases used across the connector."""

from __future__ import annotations

Row = list[str]
RawTable = list[Row]
