"""Render answer node trees into indented HTML."""

__version__ = "0.1.0"

from .errors import IndentUnderflowError, UnrenderableValueError  # noqa: E402
from .models import Node, NodeKind, NodeStyle, parse_result  # noqa: E402
from .renderers import HtmlRenderer, RenderOptions, render_object  # noqa: E402

__all__ = [
    "__version__",
    "HtmlRenderer",
    "IndentUnderflowError",
    "Node",
    "NodeKind",
    "NodeStyle",
    "RenderOptions",
    "UnrenderableValueError",
    "parse_result",
    "render_object",
]
