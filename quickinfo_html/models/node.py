"""Result node definition."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quickinfo_html.errors import UnrenderableValueError


class NodeKind(str, Enum):
    ROW = "Row"
    CELL = "Cell"
    TABLE = "Table"
    COLUMN_HEADER = "ColumnHeader"
    PARAGRAPH = "Paragraph"


class NodeStyle(str, Enum):
    SECTION_HEADER = "SectionHeader"
    FIXED = "Fixed"
    COLOR_SWATCH_NAME = "ColorSwatchName"
    COLOR_SWATCH_SMALL = "ColorSwatchSmall"
    COLOR_SWATCH_LARGE = "ColorSwatchLarge"
    COLOR = "Color"
    ASCII = "Ascii"
    ASCII_COLUMN_HEADER_CODE = "AsciiColumnHeaderCode"
    ASCII_COLUMN_CODE = "AsciiColumnCode"
    ASCII_COLUMN_HEADER_HEX = "AsciiColumnHeaderHex"
    ASCII_COLUMN_HEX = "AsciiColumnHex"
    ASCII_COLUMN_CHAR = "AsciiColumnChar"


class Node(BaseModel):
    """Immutable answer node.

    A node with ``children`` is a container and only its children are
    rendered; otherwise ``text`` (and ``search_link``) make up the leaf.
    """

    kind: str | None = Field(default=None, alias="Kind")
    style: str | None = Field(default=None, alias="Style")
    text: str | None = Field(default=None, alias="Text")
    search_link: str | None = Field(default=None, alias="SearchLink")
    children: tuple[Any, ...] | None = Field(default=None, alias="List")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> tuple[ResultValue, ...] | None:
        if value is None:
            return None
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
            raise ValueError(f"children must be a sequence, received {type(value).__name__}")
        return tuple(_coerce_child(item) for item in value)

    @property
    def is_container(self) -> bool:
        return self.children is not None


ResultValue = Union[Node, str, Sequence["ResultValue"]]


def _coerce_child(value: Any) -> ResultValue:
    if isinstance(value, (Node, str)):
        return value
    if isinstance(value, Mapping):
        return Node.model_validate(value)
    if isinstance(value, Sequence) and not isinstance(value, bytes):
        return tuple(_coerce_child(item) for item in value)
    raise ValueError(f"Unsupported child value: {type(value).__name__}")


def parse_result(data: Any) -> ResultValue:
    """Convert decoded JSON into a renderable result value."""
    if isinstance(data, (Node, str)):
        return data
    if isinstance(data, Mapping):
        return Node.model_validate(data)
    if isinstance(data, (list, tuple)):
        return tuple(parse_result(item) for item in data)
    raise UnrenderableValueError(data)


__all__ = ["Node", "NodeKind", "NodeStyle", "ResultValue", "parse_result"]
