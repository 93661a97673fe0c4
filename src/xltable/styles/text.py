from __future__ import annotations

from typing import ClassVar

from ..cell_range import CellRange
from ..types import CellDataType


class Text:
    """Plain left-aligned text."""

    data_type: ClassVar[CellDataType] = "string"

    def style_cell(self, cells: CellRange) -> None:
        cells.set_alignment(horizontal="left")


class ItalianFiscalCode:
    """Italian fiscal code / VAT number.

    Written as text; the eleven-zero format keeps leading zeros visible when
    a spreadsheet user converts the column to numbers.
    """

    data_type: ClassVar[CellDataType] = "string"
    FORMAT_CODE: ClassVar[str] = "00000000000"

    def style_cell(self, cells: CellRange) -> None:
        cells.set_number_format(self.FORMAT_CODE)
        cells.set_alignment(horizontal="left")


__all__ = ["ItalianFiscalCode", "Text"]
