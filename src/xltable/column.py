from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import DuplicateColumnError
from .styles import CellStyle


class Column(BaseModel):
    """Declared layout of one data key: heading, width and cell style."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str = Field(..., min_length=1, description="Data key in each row.")
    heading: str = Field(..., description="Column header text.")
    width: int = Field(..., gt=0, description="Column width in characters.")
    style: CellStyle = Field(..., description="Cell style for the data span.")


class ColumnCollection(Mapping[str, Column]):
    """Read-only, ordered mapping of column key to Column.

    Built once from a sequence of columns; keys keep declaration order.

    Raises:
        DuplicateColumnError: If two columns share the same key.
    """

    __slots__ = ("_columns",)

    def __init__(self, columns: Iterable[Column] = ()) -> None:
        built: dict[str, Column] = {}
        for column in columns:
            if column.key in built:
                raise DuplicateColumnError(column.key)
            built[column.key] = column
        self._columns = built

    def __getitem__(self, key: str) -> Column:
        return self._columns[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def columns(self) -> Iterator[Column]:
        """Yield columns in declaration order."""
        return iter(self._columns.values())

    def __repr__(self) -> str:
        return f"ColumnCollection({list(self._columns)!r})"


__all__ = ["Column", "ColumnCollection"]
