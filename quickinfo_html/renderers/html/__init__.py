"""HTML renderer and its markup helpers."""

from .renderer import HtmlRenderer, RenderPass, render_object
from .writer import IndentingWriter

__all__ = ["HtmlRenderer", "IndentingWriter", "RenderPass", "render_object"]
