"""Type aliases used across CampusLedger."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
Row = list[str]
Grid = list[Row]
ColumnIndex = int
RowNumber = int
