"""Column cell styles."""

from __future__ import annotations

from .base import CellStyle, ContentDecorator, StatefulStyle
from .date import Date
from .numeric import Amount, Integer, PaddedInteger, Percentage
from .text import ItalianFiscalCode, Text

__all__ = [
    "Amount",
    "CellStyle",
    "ContentDecorator",
    "Date",
    "Integer",
    "ItalianFiscalCode",
    "PaddedInteger",
    "Percentage",
    "StatefulStyle",
    "Text",
]
