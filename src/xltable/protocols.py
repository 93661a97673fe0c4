"""Protocols for the subset of the openpyxl object model used by xltable."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OpenpyxlCellProtocol(Protocol):
    """Protocol for openpyxl cell access used by the table writer."""

    value: object
    data_type: str
    number_format: str
    font: object
    fill: object
    border: object
    alignment: object


@runtime_checkable
class OpenpyxlRowDimensionProtocol(Protocol):
    """Protocol for openpyxl row dimension access."""

    height: float | None


@runtime_checkable
class OpenpyxlColumnDimensionProtocol(Protocol):
    """Protocol for openpyxl column dimension access."""

    width: float | None


@runtime_checkable
class OpenpyxlRowDimensionsProtocol(Protocol):
    """Protocol for openpyxl row dimensions collection."""

    def __getitem__(self, key: int) -> OpenpyxlRowDimensionProtocol: ...


@runtime_checkable
class OpenpyxlColumnDimensionsProtocol(Protocol):
    """Protocol for openpyxl column dimensions collection."""

    def __getitem__(self, key: str) -> OpenpyxlColumnDimensionProtocol: ...


@runtime_checkable
class OpenpyxlAutoFilterProtocol(Protocol):
    """Protocol for openpyxl worksheet autofilter."""

    ref: str | None


@runtime_checkable
class OpenpyxlConditionalFormattingProtocol(Protocol):
    """Protocol for openpyxl conditional formatting list."""

    def add(self, range_string: str, cfRule: object) -> None: ...


@runtime_checkable
class OpenpyxlSelectionProtocol(Protocol):
    """Protocol for one openpyxl sheet view selection."""

    activeCell: str | None
    sqref: object


@runtime_checkable
class OpenpyxlSheetViewProtocol(Protocol):
    """Protocol for openpyxl sheet view access."""

    selection: list[OpenpyxlSelectionProtocol]


@runtime_checkable
class OpenpyxlWorksheetProtocol(Protocol):
    """Protocol for openpyxl worksheet access used by the table writer."""

    title: str
    freeze_panes: object
    row_dimensions: OpenpyxlRowDimensionsProtocol
    column_dimensions: OpenpyxlColumnDimensionsProtocol
    auto_filter: OpenpyxlAutoFilterProtocol
    conditional_formatting: OpenpyxlConditionalFormattingProtocol
    sheet_view: OpenpyxlSheetViewProtocol

    @property
    def parent(self) -> OpenpyxlWorkbookProtocol: ...

    def cell(
        self, row: int, column: int, value: object = None
    ) -> OpenpyxlCellProtocol: ...


@runtime_checkable
class OpenpyxlWorkbookProtocol(Protocol):
    """Protocol for openpyxl workbook access used by the table writer."""

    sheetnames: list[str]

    def create_sheet(
        self, title: str | None = None, index: int | None = None
    ) -> OpenpyxlWorksheetProtocol: ...


__all__ = [
    "OpenpyxlCellProtocol",
    "OpenpyxlWorkbookProtocol",
    "OpenpyxlWorksheetProtocol",
]
