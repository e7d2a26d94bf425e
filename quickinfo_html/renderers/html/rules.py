"""Ordered rule tables deriving tag, class, inline style and text from a node.

Each table is evaluated top to bottom and the first matching rule wins, so
the order of entries is significant (kind-based tag rules outrank the
style-based ones).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from quickinfo_html.models.node import Node, NodeKind, NodeStyle


@dataclass(frozen=True, slots=True)
class Rule:
    when: Callable[[Node], bool]
    produce: Callable[[Node], str]


def _kind(*kinds: NodeKind) -> Callable[[Node], bool]:
    return lambda node: node.kind in kinds


def _style(*styles: NodeStyle) -> Callable[[Node], bool]:
    return lambda node: node.style in styles


def _both(kind: NodeKind, style: NodeStyle) -> Callable[[Node], bool]:
    return lambda node: node.kind == kind and node.style == style


def _const(value: str) -> Callable[[Node], str]:
    return lambda node: value


def background_style(color: str | None, *extra: str) -> str:
    return ";".join([f"background:{color or ''}", *extra])


def first_match(rules: Sequence[Rule], node: Node) -> str | None:
    for rule in rules:
        if rule.when(node):
            return rule.produce(node)
    return None


TAG_RULES: tuple[Rule, ...] = (
    Rule(_kind(NodeKind.ROW), _const("tr")),
    Rule(_kind(NodeKind.CELL), _const("td")),
    Rule(_kind(NodeKind.TABLE), _const("table")),
    Rule(_kind(NodeKind.COLUMN_HEADER), _const("th")),
    Rule(_style(NodeStyle.COLOR_SWATCH_LARGE, NodeStyle.COLOR_SWATCH_SMALL), _const("div")),
    Rule(_kind(NodeKind.PARAGRAPH), _const("div")),
)

CLASS_RULES: tuple[Rule, ...] = (
    Rule(_style(NodeStyle.SECTION_HEADER), _const("sectionHeader")),
    Rule(_style(NodeStyle.FIXED), _const("fixed")),
    Rule(_style(NodeStyle.COLOR_SWATCH_NAME), _const("swatchName")),
)

STYLE_RULES: tuple[Rule, ...] = (
    Rule(_both(NodeKind.TABLE, NodeStyle.COLOR), _const("border-spacing: 10px")),
    Rule(
        _style(NodeStyle.COLOR_SWATCH_LARGE),
        lambda node: background_style(node.text, "max-width:300px", "height:50px"),
    ),
    Rule(_both(NodeKind.TABLE, NodeStyle.ASCII), _const("font-size: 12pt")),
    Rule(
        _style(NodeStyle.ASCII_COLUMN_HEADER_CODE, NodeStyle.ASCII_COLUMN_CODE),
        _const("color: lightseagreen"),
    ),
    Rule(
        _style(NodeStyle.ASCII_COLUMN_HEADER_HEX, NodeStyle.ASCII_COLUMN_HEX),
        _const("color: lightgray"),
    ),
    Rule(_style(NodeStyle.ASCII_COLUMN_CHAR), _const("column-width: 60px")),
)

# Swatch styles render as colour blocks only.
_TEXTLESS_STYLES = (NodeStyle.COLOR_SWATCH_LARGE, NodeStyle.COLOR_SWATCH_SMALL)


def get_tag(node: Node) -> str | None:
    return first_match(TAG_RULES, node)


def get_class(node: Node) -> str | None:
    return first_match(CLASS_RULES, node)


def get_style(node: Node) -> str | None:
    return first_match(STYLE_RULES, node)


def get_text(node: Node) -> str | None:
    if node.style in _TEXTLESS_STYLES:
        return None
    return node.text


__all__ = [
    "CLASS_RULES",
    "Rule",
    "STYLE_RULES",
    "TAG_RULES",
    "background_style",
    "first_match",
    "get_class",
    "get_style",
    "get_tag",
    "get_text",
]
