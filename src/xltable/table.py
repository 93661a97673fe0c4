from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging

from .column import ColumnCollection
from .errors import (
    CountNotSetError,
    DataRowStartAlreadyFlaggedError,
    DataRowStartNotFlaggedError,
)
from .protocols import OpenpyxlWorksheetProtocol
from .types import Row

logger = logging.getLogger(__name__)

SHEET_ORIGIN_ROW = 1


class Table:
    """Layout state of one table on one worksheet.

    Tracks the write cursor (``row_current``/``column_current``) and the
    extent reached so far (``row_end``/``column_end``). Ends are updated after
    the cursor moves, so they always point one past the last written
    row/column. A table that does not fit on one sheet is continued by the
    fragments returned from :meth:`split_on_new_sheet`.

    Args:
        sheet: Worksheet the table is written to.
        row: 1-based row of the heading cell.
        column: 1-based column of the first table column.
        heading: Text written above the column headers.
        data: Rows to write. Consumed once; may be a one-shot iterator.
        columns: Declared columns; keys missing here get default layout.
        freeze_panes: Freeze the rows above the first data row.
        font_size: Font size of data cells (heading uses ``font_size + 2``).
        row_height: Fixed height of every written row, if set.
        text_wrap: Wrap text in data cells.
    """

    def __init__(
        self,
        sheet: OpenpyxlWorksheetProtocol,
        row: int,
        column: int,
        heading: str,
        data: Iterable[Row],
        *,
        columns: ColumnCollection | None = None,
        freeze_panes: bool = True,
        font_size: int = 10,
        row_height: float | None = None,
        text_wrap: bool = False,
    ) -> None:
        self._sheet = sheet
        self._row_start = self._row_end = self._row_current = row
        self._column_start = self._column_end = self._column_current = column
        self._data_row_start: int | None = None
        self._written_columns: dict[int, str] = {}
        self._written_column_titles: dict[str, str] = {}
        self._count: int | None = None

        self.heading = heading
        self.data = data
        self.columns = columns if columns is not None else ColumnCollection()
        self.freeze_panes = freeze_panes
        self.font_size = font_size
        self.row_height = row_height
        self.text_wrap = text_wrap

    @property
    def sheet(self) -> OpenpyxlWorksheetProtocol:
        return self._sheet

    @property
    def row_start(self) -> int:
        return self._row_start

    @property
    def row_current(self) -> int:
        return self._row_current

    @property
    def row_end(self) -> int:
        return self._row_end

    @property
    def column_start(self) -> int:
        return self._column_start

    @property
    def column_current(self) -> int:
        return self._column_current

    @property
    def column_end(self) -> int:
        return self._column_end

    def increment_row(self) -> None:
        self._row_current += 1
        self._row_end = max(self._row_end, self._row_current)

    def increment_column(self) -> None:
        self._column_current += 1
        self._column_end = max(self._column_end, self._column_current)

    def reset_column(self) -> None:
        """Move the cursor back to the first column; the extent is kept."""
        self._column_current = self._column_start

    @property
    def data_row_start(self) -> int:
        """First row below the column headers.

        Raises:
            DataRowStartNotFlaggedError: If headers have not been written yet.
        """
        if self._data_row_start is None:
            raise DataRowStartNotFlaggedError()
        return self._data_row_start

    def has_data_row_start(self) -> bool:
        return self._data_row_start is not None

    def flag_data_row_start(self) -> None:
        """Record the current row as the first data row (once per fragment)."""
        if self._data_row_start is not None:
            raise DataRowStartAlreadyFlaggedError(self._data_row_start)
        self._data_row_start = self._row_current

    @property
    def written_columns(self) -> Mapping[int, str]:
        """Physical column index -> data key, as written in the header row."""
        return dict(self._written_columns)

    @property
    def written_column_titles(self) -> Mapping[str, str]:
        """Data key -> header text, in written order."""
        return dict(self._written_column_titles)

    def set_written_columns(
        self, columns: Mapping[int, str], titles: Mapping[str, str]
    ) -> None:
        self._written_columns = dict(columns)
        self._written_column_titles = dict(titles)

    @property
    def count(self) -> int:
        """Number of data rows written on this fragment.

        Raises:
            CountNotSetError: If the table has not been written yet.
        """
        if self._count is None:
            raise CountNotSetError()
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        self._count = value

    def __len__(self) -> int:
        return self.count

    def is_empty(self) -> bool:
        return self.count == 0

    def split_on_new_sheet(self) -> Table:
        """Continue this table on a new worksheet of the same workbook.

        The new fragment starts at the sheet origin row and at this table's
        first column, and shares the (already partly consumed) data iterable.
        """
        sheet = self._sheet.parent.create_sheet()
        logger.debug(
            "Continuing table %r from sheet %r on new sheet %r",
            self.heading,
            self._sheet.title,
            sheet.title,
        )
        return Table(
            sheet,
            SHEET_ORIGIN_ROW,
            self._column_start,
            self.heading,
            self.data,
            columns=self.columns,
            freeze_panes=self.freeze_panes,
            font_size=self.font_size,
            row_height=self.row_height,
            text_wrap=self.text_wrap,
        )

    def __repr__(self) -> str:
        return (
            f"Table(sheet={self._sheet.title!r}, heading={self.heading!r}, "
            f"rows={self._row_start}..{self._row_end}, "
            f"columns={self._column_start}..{self._column_end})"
        )


__all__ = ["SHEET_ORIGIN_ROW", "Table"]
