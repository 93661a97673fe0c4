from __future__ import annotations


class XlTableError(Exception):
    """Base class for errors raised by xltable."""


class PreconditionError(XlTableError, RuntimeError):
    """A table was used out of order (programming error, never retried)."""


class CountNotSetError(PreconditionError):
    """Row count was read before the writer finalized it."""

    def __init__(self) -> None:
        super().__init__("Table count not set: write the table before reading it.")


class DataRowStartNotFlaggedError(PreconditionError):
    """First data row was read before the column headers were written."""

    def __init__(self) -> None:
        super().__init__(
            "Data row start not flagged: column headers have not been written."
        )


class DataRowStartAlreadyFlaggedError(PreconditionError):
    """First data row was flagged twice on the same sheet fragment."""

    def __init__(self, row: int) -> None:
        super().__init__(f"Data row start already flagged at row {row}.")
        self.row = row


class DuplicateColumnError(XlTableError, ValueError):
    """Two columns with the same key were given to one collection."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate column key: {key}")
        self.key = key


__all__ = [
    "CountNotSetError",
    "DataRowStartAlreadyFlaggedError",
    "DataRowStartNotFlaggedError",
    "DuplicateColumnError",
    "PreconditionError",
    "XlTableError",
]
