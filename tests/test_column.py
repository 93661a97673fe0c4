from __future__ import annotations

from pydantic import ValidationError
import pytest

from xltable.column import Column, ColumnCollection
from xltable.errors import DuplicateColumnError
from xltable.styles import Amount, Text


def _column(key: str = "foo") -> Column:
    return Column(key=key, heading=key.title(), width=10, style=Text())


def test_collection_lookup() -> None:
    column = _column("foo")
    collection = ColumnCollection([column])

    assert "foo" in collection
    assert collection["foo"] is column
    assert collection.get("bar") is None
    assert len(collection) == 1


def test_collection_keeps_declaration_order() -> None:
    collection = ColumnCollection([_column("b"), _column("a"), _column("c")])

    assert list(collection) == ["b", "a", "c"]
    assert [column.key for column in collection.columns()] == ["b", "a", "c"]


def test_collection_rejects_duplicate_keys() -> None:
    with pytest.raises(DuplicateColumnError, match="Duplicate column key: foo") as info:
        ColumnCollection([_column("foo"), _column("bar"), _column("foo")])
    assert info.value.key == "foo"


def test_collection_is_read_only() -> None:
    collection = ColumnCollection([_column("foo")])

    with pytest.raises(TypeError):
        collection["bar"] = _column("bar")  # type: ignore[index]
    with pytest.raises(TypeError):
        del collection["foo"]  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        collection._extra = {}  # type: ignore[attr-defined]
    assert list(collection) == ["foo"]


def test_empty_collection() -> None:
    collection = ColumnCollection()

    assert len(collection) == 0
    assert "foo" not in collection


def test_column_is_frozen() -> None:
    column = Column(key="total", heading="Total", width=12, style=Amount())

    with pytest.raises(ValidationError):
        column.width = 20  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"key": "", "heading": "Foo", "width": 10},
        {"key": "foo", "heading": "Foo", "width": 0},
        {"key": "foo", "heading": "Foo", "width": -3},
    ],
)
def test_column_rejects_invalid_layout(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        Column(style=Text(), **kwargs)  # type: ignore[arg-type]


def test_column_rejects_object_without_style_capability() -> None:
    with pytest.raises(ValidationError):
        Column(key="foo", heading="Foo", width=10, style=object())  # type: ignore[arg-type]
