"""Write paginated, styled tables to openpyxl workbooks."""

from __future__ import annotations

from .cell_range import CellRange
from .column import Column, ColumnCollection
from .errors import (
    CountNotSetError,
    DataRowStartAlreadyFlaggedError,
    DataRowStartNotFlaggedError,
    DuplicateColumnError,
    PreconditionError,
    XlTableError,
)
from .table import Table
from .writer import TableWriter, TableWriterConfig, sanitize

__all__ = [
    "CellRange",
    "Column",
    "ColumnCollection",
    "CountNotSetError",
    "DataRowStartAlreadyFlaggedError",
    "DataRowStartNotFlaggedError",
    "DuplicateColumnError",
    "PreconditionError",
    "Table",
    "TableWriter",
    "TableWriterConfig",
    "XlTableError",
    "sanitize",
]
