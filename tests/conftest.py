from __future__ import annotations

from typing import Callable

import pytest

from quickinfo_html.models import Node
from quickinfo_html.renderers import HtmlRenderer


@pytest.fixture
def renderer() -> HtmlRenderer:
    return HtmlRenderer()


@pytest.fixture
def node_factory() -> Callable[..., Node]:
    def _factory(
        *,
        kind=None,
        style=None,
        text=None,
        search_link=None,
        children=None,
    ) -> Node:
        return Node(
            kind=kind,
            style=style,
            text=text,
            search_link=search_link,
            children=children,
        )

    return _factory
