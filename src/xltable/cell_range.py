from __future__ import annotations

from collections.abc import Iterator
from copy import copy
import re

from openpyxl.styles import PatternFill, Side

from .a1 import range_ref
from .protocols import OpenpyxlCellProtocol, OpenpyxlWorksheetProtocol
from .types import BorderStyleType, HorizontalAlignType, VerticalAlignType

_HEX_COLOR_PATTERN = re.compile(r"^#?(?:[0-9A-F]{6}|[0-9A-F]{8})$")


def normalize_hex_color(value: str) -> str:
    """Normalize HEX input into AARRGGBB form for workbook internals.

    Args:
        value: Color as 'RRGGBB', 'AARRGGBB', '#RRGGBB' or '#AARRGGBB'.

    Returns:
        Uppercase AARRGGBB string without '#'.

    Raises:
        ValueError: If the value is not valid HEX color text.
    """
    text = value.strip().upper()
    if not _HEX_COLOR_PATTERN.match(text):
        raise ValueError(
            f"Invalid color {value!r}. Use 'RRGGBB', 'AARRGGBB', "
            "'#RRGGBB', or '#AARRGGBB'."
        )
    raw = text.removeprefix("#")
    return raw if len(raw) == 8 else f"FF{raw}"


class CellRange:
    """Rectangular style handle over one worksheet.

    Every setter copies the current openpyxl style object of each cell and
    changes only the requested attributes, so styles applied by earlier
    calls (e.g. the font set while writing rows) survive.
    """

    def __init__(
        self,
        sheet: OpenpyxlWorksheetProtocol,
        min_column: int,
        min_row: int,
        max_column: int | None = None,
        max_row: int | None = None,
    ) -> None:
        self.sheet = sheet
        self.min_column = min_column
        self.min_row = min_row
        self.max_column = min_column if max_column is None else max_column
        self.max_row = min_row if max_row is None else max_row

    @property
    def ref(self) -> str:
        """Return the range as an A1 reference (e.g. 'B3:D9')."""
        return range_ref(self.min_column, self.min_row, self.max_column, self.max_row)

    def cells(self) -> Iterator[OpenpyxlCellProtocol]:
        """Yield every cell of the range, row by row."""
        for row in range(self.min_row, self.max_row + 1):
            for column in range(self.min_column, self.max_column + 1):
                yield self.sheet.cell(row=row, column=column)

    def set_number_format(self, format_code: str) -> None:
        for cell in self.cells():
            cell.number_format = format_code

    def set_alignment(
        self,
        *,
        horizontal: HorizontalAlignType | None = None,
        vertical: VerticalAlignType | None = None,
        wrap_text: bool | None = None,
    ) -> None:
        """Update alignment attributes that are not None."""
        for cell in self.cells():
            alignment = copy(cell.alignment)
            if horizontal is not None:
                alignment.horizontal = horizontal
            if vertical is not None:
                alignment.vertical = vertical
            if wrap_text is not None:
                alignment.wrap_text = wrap_text
            cell.alignment = alignment

    def set_font(
        self,
        *,
        size: float | None = None,
        bold: bool | None = None,
        color: str | None = None,
    ) -> None:
        """Update font attributes that are not None."""
        normalized = normalize_hex_color(color) if color is not None else None
        for cell in self.cells():
            font = copy(cell.font)
            if size is not None:
                font.size = size
            if bold is not None:
                font.bold = bold
            if normalized is not None:
                font.color = normalized
            cell.font = font

    def set_fill(self, color: str) -> None:
        """Apply a solid fill."""
        normalized = normalize_hex_color(color)
        for cell in self.cells():
            cell.fill = PatternFill(
                fill_type="solid",
                start_color=normalized,
                end_color=normalized,
            )

    def set_border(
        self, style: BorderStyleType = "thin", color: str = "FF000000"
    ) -> None:
        """Set the same border side on all four edges of every cell."""
        side = Side(style=style, color=normalize_hex_color(color))
        for cell in self.cells():
            border = copy(cell.border)
            border.top = side
            border.right = side
            border.bottom = side
            border.left = side
            cell.border = border

    def __repr__(self) -> str:
        return f"CellRange({self.sheet.title!r}, {self.ref!r})"


__all__ = ["CellRange", "normalize_hex_color"]
