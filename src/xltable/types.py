from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Literal, TypeAlias

# datetime values are covered by date
CellValue: TypeAlias = str | int | float | date | None
Row: TypeAlias = Mapping[str, CellValue]

CellDataType = Literal["string", "numeric", "null"]

HorizontalAlignType = Literal[
    "general",
    "left",
    "center",
    "right",
    "fill",
    "justify",
    "centerContinuous",
    "distributed",
]
VerticalAlignType = Literal["top", "center", "bottom", "justify", "distributed"]
BorderStyleType = Literal[
    "thin",
    "medium",
    "thick",
    "dashed",
    "dotted",
    "double",
    "hair",
]
