from __future__ import annotations

from datetime import date
import logging
from typing import ClassVar

from openpyxl.utils.datetime import to_excel

from ..cell_range import CellRange
from ..types import CellDataType, CellValue

logger = logging.getLogger(__name__)


class Date:
    """Calendar date given as ISO text ('2017-03-02') or a date object.

    Values are written as Excel serial numbers so the column sorts and
    filters as dates; text that is not an ISO date is left unchanged.
    """

    data_type: ClassVar[CellDataType] = "numeric"
    FORMAT_CODE: ClassVar[str] = "dd/mm/yyyy"

    def decorate(self, value: CellValue) -> CellValue:
        if isinstance(value, date):
            return _serial(value)
        if not isinstance(value, str):
            return value
        try:
            parsed = date.fromisoformat(value.strip())
        except ValueError:
            logger.debug("Not an ISO date, keeping text: %r", value)
            return value
        return _serial(parsed)

    def style_cell(self, cells: CellRange) -> None:
        cells.set_alignment(horizontal="center")
        cells.set_number_format(self.FORMAT_CODE)


def _serial(value: date) -> int | float:
    serial = to_excel(value)
    return int(serial) if float(serial).is_integer() else serial


__all__ = ["Date"]
