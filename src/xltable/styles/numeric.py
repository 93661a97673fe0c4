from __future__ import annotations

import math
from typing import ClassVar

from ..cell_range import CellRange
from ..types import CellDataType, CellValue


class Integer:
    data_type: ClassVar[CellDataType] = "numeric"
    FORMAT_CODE: ClassVar[str] = "#,##0"

    def style_cell(self, cells: CellRange) -> None:
        cells.set_alignment(horizontal="center")
        cells.set_number_format(self.FORMAT_CODE)


class Amount:
    data_type: ClassVar[CellDataType] = "numeric"
    FORMAT_CODE: ClassVar[str] = "#,##0.00"

    def style_cell(self, cells: CellRange) -> None:
        cells.set_number_format(self.FORMAT_CODE)


class Percentage:
    data_type: ClassVar[CellDataType] = "numeric"
    FORMAT_CODE: ClassVar[str] = "#,##0.000"

    def style_cell(self, cells: CellRange) -> None:
        cells.set_number_format(self.FORMAT_CODE)


class PaddedInteger:
    """Integer zero-padded to the longest value seen in the column.

    The width is only known once every row has gone through ``decorate``.
    The writer resets it at the start of each table, so one instance must
    not be shared between concurrent writes.
    """

    data_type: ClassVar[CellDataType] = "numeric"

    def __init__(self) -> None:
        self.max_length = 0

    def reset(self) -> None:
        self.max_length = 0

    def decorate(self, value: CellValue) -> CellValue:
        length = _digit_count(value)
        if length:
            self.max_length = max(self.max_length, length)
        return value

    def style_cell(self, cells: CellRange) -> None:
        cells.set_alignment(horizontal="center")
        if self.max_length:
            cells.set_number_format("0" * self.max_length)


def _digit_count(value: CellValue) -> int:
    """Count the digits of the integer part, ignoring the sign."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    if isinstance(value, (int, float)):
        return len(str(abs(int(value))))
    if isinstance(value, str):
        return len(value.strip().lstrip("+-"))
    return 0


__all__ = ["Amount", "Integer", "PaddedInteger", "Percentage"]
