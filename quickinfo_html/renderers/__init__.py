"""Renderer implementations and helpers."""

from .base import RenderOptions, Renderer
from .html import HtmlRenderer, render_object

__all__ = ["HtmlRenderer", "RenderOptions", "Renderer", "render_object"]
