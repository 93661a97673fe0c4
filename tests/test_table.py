from __future__ import annotations

import random

from openpyxl import Workbook
import pytest

from xltable.column import Column, ColumnCollection
from xltable.errors import (
    CountNotSetError,
    DataRowStartAlreadyFlaggedError,
    DataRowStartNotFlaggedError,
    PreconditionError,
)
from xltable.styles import Text
from xltable.table import SHEET_ORIGIN_ROW, Table

ROWS = [{"name": "a"}, {"name": "b"}]


def _table(workbook: Workbook) -> Table:
    return Table(workbook.active, 3, 12, "My Heading", ROWS)


def test_row_and_column_cursor(workbook: Workbook) -> None:
    table = _table(workbook)

    assert table.sheet is workbook.active
    assert table.heading == "My Heading"
    assert table.data is ROWS

    table.increment_row()
    table.flag_data_row_start()
    table.increment_row()

    assert table.row_start == 3
    assert table.data_row_start == 4
    assert table.row_end == 5
    assert table.row_current == 5

    table.increment_column()
    table.increment_column()

    assert table.column_start == 12
    assert table.column_end == 14
    assert table.column_current == 14

    table.reset_column()

    assert table.column_start == 12
    assert table.column_end == 14
    assert table.column_current == 12


def test_cursor_extent_is_monotonic(workbook: Workbook) -> None:
    table = _table(workbook)
    rng = random.Random(20240501)
    previous_row_end = table.row_end
    previous_column_end = table.column_end

    for _ in range(200):
        operation = rng.choice(
            [table.increment_row, table.increment_column, table.reset_column]
        )
        operation()
        assert table.row_end == max(table.row_end, table.row_current)
        assert table.column_end == max(table.column_end, table.column_current)
        assert table.row_end >= previous_row_end
        assert table.column_end >= previous_column_end
        assert table.row_start <= table.row_current
        assert table.column_start <= table.column_current
        previous_row_end = table.row_end
        previous_column_end = table.column_end


def test_data_row_start_must_be_flagged(workbook: Workbook) -> None:
    table = _table(workbook)

    assert table.has_data_row_start() is False
    with pytest.raises(DataRowStartNotFlaggedError):
        _ = table.data_row_start


def test_data_row_start_is_flagged_once(workbook: Workbook) -> None:
    table = _table(workbook)
    table.flag_data_row_start()
    table.increment_row()

    with pytest.raises(DataRowStartAlreadyFlaggedError, match="row 3"):
        table.flag_data_row_start()
    assert table.data_row_start == 3


def test_table_count_must_be_set(workbook: Workbook) -> None:
    table = _table(workbook)

    with pytest.raises(CountNotSetError):
        _ = table.count
    with pytest.raises(PreconditionError):
        len(table)
    with pytest.raises(CountNotSetError):
        table.is_empty()


def test_table_count(workbook: Workbook) -> None:
    table = _table(workbook)

    table.count = 0
    assert len(table) == 0
    assert table.is_empty() is True

    table.count = 5
    assert len(table) == 5
    assert table.is_empty() is False


def test_written_columns(workbook: Workbook) -> None:
    table = _table(workbook)
    assert table.written_columns == {}
    assert table.written_column_titles == {}

    table.set_written_columns(
        {12: "column_1", 13: "column_2"},
        {"column_1": "Name", "column_2": "Surname"},
    )

    assert table.written_columns == {12: "column_1", 13: "column_2"}
    assert table.written_column_titles == {"column_1": "Name", "column_2": "Surname"}


def test_default_attributes(workbook: Workbook) -> None:
    table = _table(workbook)

    assert table.freeze_panes is True
    assert table.font_size == 10
    assert table.row_height is None
    assert table.text_wrap is False
    assert len(table.columns) == 0


def test_split_on_new_sheet(workbook: Workbook) -> None:
    columns = ColumnCollection(
        [Column(key="name", heading="Name", width=20, style=Text())]
    )
    data = iter(ROWS)
    table = Table(
        workbook.active,
        3,
        12,
        "My Heading",
        data,
        columns=columns,
        freeze_panes=False,
        font_size=14,
        row_height=30,
        text_wrap=True,
    )
    table.increment_row()
    table.increment_column()
    table.flag_data_row_start()

    new_table = table.split_on_new_sheet()

    assert new_table is not table
    assert new_table.sheet is not table.sheet
    assert new_table.sheet in workbook.worksheets
    assert len(workbook.worksheets) == 2

    # rows restart at the sheet origin
    assert new_table.row_start == SHEET_ORIGIN_ROW
    assert new_table.row_end == SHEET_ORIGIN_ROW
    assert new_table.row_current == SHEET_ORIGIN_ROW

    # columns never shift horizontally
    assert new_table.column_start == 12
    assert new_table.column_end == 12
    assert new_table.column_current == 12

    assert new_table.heading == table.heading
    assert new_table.data is data
    assert new_table.columns is columns
    assert new_table.freeze_panes is False
    assert new_table.font_size == 14
    assert new_table.row_height == 30
    assert new_table.text_wrap is True
    assert new_table.has_data_row_start() is False
    assert new_table.written_columns == {}
    with pytest.raises(CountNotSetError):
        _ = new_table.count
