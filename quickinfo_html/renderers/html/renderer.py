"""HTML renderer for answer nodes."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager, nullcontext
from dataclasses import dataclass, field
from typing import Any

from quickinfo_html.errors import UnrenderableValueError
from quickinfo_html.models.node import Node, NodeKind, NodeStyle, ResultValue
from quickinfo_html.renderers.base import RenderOptions, Renderer

from .factory import Attribute, search_link_attributes, tag_end, tag_start
from .factory import search_link as search_link_fragment
from .rules import background_style, get_class, get_style, get_tag, get_text
from .writer import IndentingWriter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HtmlRenderer(Renderer):
    options: RenderOptions = field(default_factory=RenderOptions)

    def render(
        self,
        value: ResultValue,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        opts = options or self.options
        writer = IndentingWriter(opts.indent, opts.newline)
        RenderPass(writer=writer, options=opts).render(value)
        output = writer.getvalue()
        logger.debug("Rendered %s into %d characters", type(value).__name__, len(output))
        return output


@dataclass(slots=True)
class RenderPass:
    """State for a single ``HtmlRenderer.render`` call."""

    writer: IndentingWriter
    options: RenderOptions

    def render(self, value: ResultValue) -> None:
        if isinstance(value, Node):
            self.render_node(value)
        elif isinstance(value, str):
            # Producer text is already safe markup; written verbatim.
            self.write(value)
        elif isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            self.render_list(value)
        else:
            raise UnrenderableValueError(value)

    def render_node(self, node: Node) -> None:
        tag = get_tag(node)
        node_class = get_class(node)
        node_style = get_style(node)

        if tag is None:
            if node.is_container:
                tag = "div"
            elif node_class is not None or node_style is not None:
                tag = "span"

        with self.tag(tag, node_class, node_style, multiline_content=node.is_container):
            if node.children is not None:
                for child in node.children:
                    self.render(child)
            else:
                self.render_content(node)

    def render_content(self, node: Node) -> None:
        with self.search_link(node.search_link, multiline_content=False):
            if node.style == NodeStyle.COLOR_SWATCH_SMALL:
                with self.tag(
                    "div",
                    style=background_style(node.text, "width:60px", "height:16px"),
                    multiline_content=False,
                ):
                    return

            self.render_text(node)

    def render_list(self, items: Iterable[ResultValue]) -> None:
        with self.tag("div"):
            for item in items:
                self.render(item)

    def render_text(self, node: Node) -> None:
        text = node.text

        if node.kind == NodeKind.CELL and node.style == NodeStyle.COLOR:
            with self.search_link(text):
                with self.tag("div", "swatch", background_style(text)):
                    pass

            with self.div_class("swatchName"):
                self.write(text)

            return

        text = get_text(node)
        if text is not None:
            self.write(text)

    def render_search_link(self, content: str, query: str) -> None:
        fragment = search_link_fragment(content, query, search_function=self.options.search_function)
        self.writer.write(fragment)

    def write(self, text: str | None) -> None:
        if text:
            self.writer.write(text)

    def write_line(self, text: str) -> None:
        self.writer.write_line(text)

    # Scoped tags ------------------------------------------------------

    def search_link(
        self,
        query: str | None,
        *,
        multiline_content: bool = True,
    ) -> AbstractContextManager[None]:
        if query is None:
            return nullcontext()
        attributes = search_link_attributes(query, search_function=self.options.search_function)
        return self.tag("a", multiline_content=multiline_content, attributes=attributes)

    def div_class(self, css_class: str) -> AbstractContextManager[None]:
        return self.tag("div", css_class)

    def node_tag(self, tag: str | None, node: Node) -> AbstractContextManager[None]:
        if tag is None:
            return nullcontext()
        return self.tag(tag, get_class(node), get_style(node))

    @contextmanager
    def tag(
        self,
        tag: str | None,
        css_class: str | None = None,
        style: str | None = None,
        *,
        multiline_content: bool = True,
        attributes: Iterable[Attribute] = (),
    ) -> Iterator[None]:
        """Open ``tag`` for the duration of the block; a ``None`` tag emits nothing."""
        if tag is None:
            yield
            return

        start = tag_start(tag, css_class, style, attributes)
        if multiline_content:
            start += self.options.newline
        self.writer.write(start)
        self.writer.indent()
        try:
            yield
        finally:
            self.writer.unindent()
            self.writer.write_line(tag_end(tag))


_DEFAULT_RENDERER = HtmlRenderer()


def render_object(value: ResultValue) -> str:
    """Render ``value`` with the default options."""
    return _DEFAULT_RENDERER.render(value)


__all__ = ["HtmlRenderer", "RenderPass", "render_object"]
