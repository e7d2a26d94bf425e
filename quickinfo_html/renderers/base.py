"""Renderer interfaces and shared options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from quickinfo_html.models.node import ResultValue


@dataclass(slots=True, frozen=True)
class RenderOptions:
    indent: str = "  "
    newline: str = "\n"
    search_function: str = "searchFor"


class Renderer(Protocol):
    def render(
        self,
        value: ResultValue,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        ...


__all__ = ["RenderOptions", "Renderer"]
