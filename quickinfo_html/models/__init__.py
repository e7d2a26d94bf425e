"""Answer node model exports."""

from .node import Node, NodeKind, NodeStyle, ResultValue, parse_result

__all__ = ["Node", "NodeKind", "NodeStyle", "ResultValue", "parse_result"]
