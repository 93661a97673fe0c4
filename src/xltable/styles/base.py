from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..cell_range import CellRange
from ..types import CellDataType, CellValue


@runtime_checkable
class CellStyle(Protocol):
    """Semantic type and visual formatting rule for one column.

    ``style_cell`` is called once per sheet fragment, over the whole data
    span of the column, after every row of every fragment has been written.
    """

    data_type: CellDataType

    def style_cell(self, cells: CellRange) -> None: ...


@runtime_checkable
class ContentDecorator(CellStyle, Protocol):
    """Cell style that also transforms each value before it is written."""

    def decorate(self, value: CellValue) -> CellValue: ...


@runtime_checkable
class StatefulStyle(Protocol):
    """Style that collects state while rows are written.

    ``reset`` is called once at the start of every table write.
    """

    def reset(self) -> None: ...


__all__ = ["CellStyle", "ContentDecorator", "StatefulStyle"]
