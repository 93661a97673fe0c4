from __future__ import annotations


def column_index_to_label(index: int) -> str:
    """Convert 1-based column index to Excel-style column label."""
    if index < 1:
        raise ValueError("Column index must be positive.")
    chunks: list[str] = []
    current = index
    while current > 0:
        current -= 1
        chunks.append(chr(ord("A") + (current % 26)))
        current //= 26
    return "".join(reversed(chunks))


def cell_ref(column: int, row: int) -> str:
    """Build an A1 cell reference from 1-based column and row indexes."""
    if row < 1:
        raise ValueError("Row index must be positive.")
    return f"{column_index_to_label(column)}{row}"


def range_ref(min_column: int, min_row: int, max_column: int, max_row: int) -> str:
    """Build a normalized A1 range reference from two corners.

    Corners may be given in any order; the result always runs from the
    top-left to the bottom-right cell.
    """
    left, right = sorted((min_column, max_column))
    top, bottom = sorted((min_row, max_row))
    return f"{cell_ref(left, top)}:{cell_ref(right, bottom)}"


__all__ = [
    "cell_ref",
    "column_index_to_label",
    "range_ref",
]
