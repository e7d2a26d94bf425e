"""Markup string helpers used by the HTML renderer.

Every function here is pure: given a tag name and attributes it returns the
markup string and never touches a writer.
"""

from __future__ import annotations

import html
import json
from collections.abc import Iterable
from urllib.parse import quote_plus

Attribute = tuple[str, str]


def tag_start(
    tag: str,
    css_class: str | None = None,
    style: str | None = None,
    attributes: Iterable[Attribute] = (),
) -> str:
    """Return the opening markup for ``tag``.

    ``class`` and ``style`` come first, followed by ``attributes`` in the
    order given. Attribute values are quoted and escaped.
    """
    parts = [tag]
    if css_class:
        parts.append(_attribute("class", css_class))
    if style:
        parts.append(_attribute("style", style))
    parts.extend(_attribute(name, value) for name, value in attributes)
    return f"<{' '.join(parts)}>"


def tag_end(tag: str) -> str:
    return f"</{tag}>"


def url_encode(text: str) -> str:
    return quote_plus(text)


def js_escape(text: str) -> str:
    """Escape ``text`` for use inside a double or single quoted JS string."""
    escaped = json.dumps(text, ensure_ascii=False)[1:-1]
    return escaped.replace("'", "\\'").replace("</", "<\\/")


def search_link_attributes(query: str, *, search_function: str = "searchFor") -> list[Attribute]:
    href = "?" + url_encode(query)
    onclick = f'{search_function}("{js_escape(query)}");return false;'
    return [("href", href), ("onclick", onclick)]


def search_link(content: str, query: str, *, search_function: str = "searchFor") -> str:
    """Return ``content`` wrapped in an anchor that triggers a search for ``query``."""
    attributes = search_link_attributes(query, search_function=search_function)
    return f"{tag_start('a', attributes=attributes)}{content}{tag_end('a')}"


def _attribute(name: str, value: str) -> str:
    return f'{name}="{html.escape(value, quote=True)}"'


__all__ = [
    "Attribute",
    "js_escape",
    "search_link",
    "search_link_attributes",
    "tag_end",
    "tag_start",
    "url_encode",
]
