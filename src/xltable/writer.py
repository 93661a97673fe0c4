from __future__ import annotations

from collections.abc import Mapping
import logging
import re
from typing import Final

from openpyxl.formatting.rule import FormulaRule
from openpyxl.styles import PatternFill
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .a1 import cell_ref, column_index_to_label, range_ref
from .cell_range import CellRange, normalize_hex_color
from .column import Column
from .protocols import OpenpyxlWorksheetProtocol
from .styles import ContentDecorator, StatefulStyle
from .table import Table
from .types import CellDataType, CellValue, Row

logger = logging.getLogger(__name__)

SANITIZE_MAP: Final[dict[str, str]] = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&apos;": "'",
    "&quot;": '"',
}
_SANITIZE_PATTERN = re.compile("|".join(re.escape(entity) for entity in SANITIZE_MAP))
_FALLBACK_WORD_START = re.compile(r"(^|\s)(\S)")

# Leaves room for " (NN|NN)" within a 30 character sheet title.
SHEET_TITLE_PREFIX_LENGTH: Final[int] = 21
XLSX_MAX_ROWS: Final[int] = 1_048_576
ZEBRA_FORMULA: Final[str] = "MOD(ROW(),2)=0"


def sanitize(value: CellValue) -> CellValue:
    """Decode the XML entities left in text values.

    Numbers and None pass through unchanged. Decoding is a single pass, so
    '&amp;lt;' becomes '&lt;' rather than '<'.
    """
    if not isinstance(value, str):
        return value
    return _SANITIZE_PATTERN.sub(lambda match: SANITIZE_MAP[match.group(0)], value)


def fallback_title(key: str) -> str:
    """Derive a header from a data key: 'unit_price' -> 'Unit Price'."""
    text = key.replace("_", " ")
    return _FALLBACK_WORD_START.sub(
        lambda match: match.group(1) + match.group(2).upper(), text
    )


class TableWriterConfig(BaseModel):
    """Options for TableWriter."""

    model_config = ConfigDict(extra="forbid", validate_default=True)

    rows_per_sheet: int = Field(
        default=262_144,
        gt=0,
        le=XLSX_MAX_ROWS,
        description="Last row index a sheet may be written to before splitting.",
    )
    empty_table_message: str = Field(
        default="", description="Text written when the table has no rows."
    )
    default_column_width: int = Field(
        default=10, gt=0, description="Width of columns missing from the collection."
    )
    header_fill_color: str = Field(
        default="D9D9D9", description="Background of the column header row."
    )
    zebra_fill_color: str = Field(
        default="F2F2F2", description="Background of every even data row."
    )
    border_color: str = Field(
        default="000000", description="Border color of column header cells."
    )

    @field_validator("header_fill_color", "zebra_fill_color", "border_color")
    @classmethod
    def _validate_color(cls, value: str) -> str:
        return normalize_hex_color(value)


class TableWriter:
    """Write tables to worksheets, splitting them across sheets when needed.

    Example:
        >>> writer = TableWriter(rows_per_sheet=65_536)
        >>> fragments = writer.write_table_to_worksheet(table)
    """

    def __init__(
        self, config: TableWriterConfig | None = None, **options: object
    ) -> None:
        if config is not None and options:
            config = TableWriterConfig.model_validate(
                {**config.model_dump(), **options}
            )
        self.config = config or TableWriterConfig.model_validate(options)

    def write_table_to_worksheet(self, table: Table) -> list[Table]:
        """Write heading, column headers and rows of a table.

        Rows are consumed once. When the cursor passes ``rows_per_sheet``
        the table continues on a new sheet; every sheet gets its own heading
        and column headers.

        Args:
            table: Table positioned on its target worksheet.

        Returns:
            One table per written sheet, in order. The first item is ``table``.
        """
        logger.debug(
            "Writing table %r to sheet %r at %s",
            table.heading,
            table.sheet.title,
            cell_ref(table.column_start, table.row_start),
        )
        for column in table.columns.columns():
            if isinstance(column.style, StatefulStyle):
                column.style.reset()
        self._write_table_heading(table)
        tables = [table]

        total = 0
        fragment_count = 0
        for row in table.data:
            if fragment_count and table.row_current > self.config.rows_per_sheet:
                table.count = fragment_count
                table = table.split_on_new_sheet()
                tables.append(table)
                logger.info(
                    "Table %r exceeded %d rows; continuing on sheet %d",
                    table.heading,
                    self.config.rows_per_sheet,
                    len(tables),
                )
                self._write_table_heading(table)
                fragment_count = 0

            if not fragment_count:
                self._write_columns_heading(table, row)

            self._write_row(table, row)
            fragment_count += 1
            total += 1
        table.count = fragment_count

        if len(tables) > 1:
            _rename_sheets(tables)

        for fragment in tables:
            self._style_columns(fragment)

        for fragment in tables:
            if fragment.freeze_panes:
                fragment.sheet.freeze_panes = cell_ref(1, fragment.row_start + 2)

        if total == 0:
            self._write_empty_table_message(table)
        else:
            for fragment in tables:
                self._apply_filter_and_stripes(fragment)

        logger.debug(
            "Wrote %d rows of table %r on %d sheet(s)", total, table.heading, len(tables)
        )
        return tables

    def _write_table_heading(self, table: Table) -> None:
        table.reset_column()
        _write_cell(
            table.sheet,
            table.column_current,
            table.row_current,
            sanitize(table.heading),
            "string",
        )
        heading = CellRange(table.sheet, table.column_current, table.row_current)
        heading.set_font(size=table.font_size + 2, bold=True)
        heading.set_alignment(wrap_text=False)
        table.increment_row()

    def _write_columns_heading(self, table: Table, row: Row) -> None:
        sheet = table.sheet
        table.reset_column()
        titles: dict[str, str] = {}
        written: dict[int, str] = {}
        for key in row:
            width = self.config.default_column_width
            title = fallback_title(key)
            column = table.columns.get(key)
            if column is not None:
                width = column.width
                title = column.heading

            sheet.column_dimensions[column_index_to_label(table.column_current)].width = (
                width
            )
            titles[key] = title
            written[table.column_current] = key
            table.increment_column()

        header_row = table.row_current
        self._write_row(table, titles, header=True)
        if written:
            header = CellRange(
                sheet, table.column_start, header_row, max(written), header_row
            )
            header.set_font(size=table.font_size, bold=True)
            header.set_alignment(horizontal="center", vertical="center", wrap_text=True)
            header.set_fill(self.config.header_fill_color)
            header.set_border("thin", self.config.border_color)

        table.set_written_columns(written, titles)
        table.flag_data_row_start()

    def _write_row(
        self, table: Table, row: Mapping[str, CellValue], *, header: bool = False
    ) -> None:
        table.reset_column()
        sheet = table.sheet
        first_column = table.column_current

        for key, value in row.items():
            content = sanitize(value)
            if header:
                data_type: CellDataType = "null" if content is None else "string"
            else:
                column = table.columns.get(key)
                if column is not None and isinstance(column.style, ContentDecorator):
                    content = column.style.decorate(content)
                data_type = _resolve_data_type(content, column)

            _write_cell(sheet, table.column_current, table.row_current, content, data_type)
            table.increment_column()

        if not header and table.column_current > first_column:
            cells = CellRange(
                sheet, first_column, table.row_current, table.column_current - 1
            )
            cells.set_font(size=table.font_size)
            cells.set_alignment(wrap_text=table.text_wrap)

        if table.row_height is not None:
            sheet.row_dimensions[table.row_current].height = table.row_height

        table.increment_row()

    def _style_columns(self, table: Table) -> None:
        if not table.has_data_row_start():
            return
        last_row = table.row_end - 1
        for column_index, key in table.written_columns.items():
            column = table.columns.get(key)
            if column is None:
                continue
            column.style.style_cell(
                CellRange(
                    table.sheet,
                    column_index,
                    table.data_row_start,
                    column_index,
                    last_row,
                )
            )

    def _apply_filter_and_stripes(self, table: Table) -> None:
        if table.column_end == table.column_start:
            logger.debug("Table %r has no columns; skipping filter", table.heading)
            return
        sheet = table.sheet
        first_row = table.data_row_start
        last_row = table.row_end - 1
        last_column = table.column_end - 1

        sheet.auto_filter.ref = range_ref(
            table.column_start, first_row - 1, last_column, last_row
        )
        zebra_fill = PatternFill(
            fill_type="solid",
            start_color=self.config.zebra_fill_color,
            end_color=self.config.zebra_fill_color,
        )
        sheet.conditional_formatting.add(
            range_ref(table.column_start, first_row, last_column, last_row),
            FormulaRule(formula=[ZEBRA_FORMULA], fill=zebra_fill),
        )
        _select_cell(sheet, cell_ref(table.column_start, first_row))

    def _write_empty_table_message(self, table: Table) -> None:
        table.increment_row()
        _write_cell(
            table.sheet,
            table.column_current,
            table.row_current,
            sanitize(self.config.empty_table_message),
            "string",
        )
        table.increment_row()


def _resolve_data_type(content: CellValue, column: Column | None) -> CellDataType:
    if content is None:
        return "null"
    if column is not None:
        return column.style.data_type
    return "string"


def _write_cell(
    sheet: OpenpyxlWorksheetProtocol,
    column: int,
    row: int,
    content: CellValue,
    data_type: CellDataType,
) -> None:
    """Write a value with an explicit data type (no formula inference)."""
    cell = sheet.cell(row=row, column=column)
    if content is None or data_type == "null":
        cell.value = None
        return
    if data_type == "numeric":
        number = _to_number(content)
        if number is not None:
            cell.value = number
            return
        logger.debug(
            "Non-numeric value %r in numeric column at %s; writing text",
            content,
            cell_ref(column, row),
        )
    cell.value = str(content)
    cell.data_type = "s"


def _to_number(value: CellValue) -> int | float | None:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def _rename_sheets(tables: list[Table]) -> None:
    prefix = tables[0].sheet.title[:SHEET_TITLE_PREFIX_LENGTH]
    total = len(tables)
    for index, table in enumerate(tables, start=1):
        table.sheet.title = f"{prefix} ({index}|{total})"


def _select_cell(sheet: OpenpyxlWorksheetProtocol, ref: str) -> None:
    for selection in sheet.sheet_view.selection:
        selection.activeCell = ref
        selection.sqref = ref


__all__ = [
    "SANITIZE_MAP",
    "TableWriter",
    "TableWriterConfig",
    "fallback_title",
    "sanitize",
]
