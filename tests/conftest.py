from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from openpyxl import Workbook, load_workbook
import pytest

Reload = Callable[[Workbook], Workbook]


@pytest.fixture
def workbook() -> Workbook:
    """Return a fresh in-memory workbook with its default sheet."""
    return Workbook()


@pytest.fixture
def reload(tmp_path: Path) -> Reload:
    """Return a helper that saves a workbook as xlsx and loads it back."""

    def _reload(source: Workbook) -> Workbook:
        path = tmp_path / "roundtrip.xlsx"
        source.save(path)
        return load_workbook(path)

    return _reload
