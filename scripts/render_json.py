"""Render a JSON answer file to indented HTML.

The JSON document is either a single node object (``Kind``/``Style``/
``Text``/``SearchLink``/``List`` keys), a string, or a list of those.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from quickinfo_html.models import parse_result
from quickinfo_html.renderers import HtmlRenderer, RenderOptions


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a JSON answer file as HTML.")
    parser.add_argument("path", type=Path, help="Path to a JSON answer document.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the markup to this file instead of stdout.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Spaces per nesting level (default 2).",
    )
    parser.add_argument("--quiet", action="store_true", help="Only log warnings.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("render_json")

    data = json.loads(args.path.read_text(encoding="utf-8"))
    value = parse_result(data)
    renderer = HtmlRenderer(options=RenderOptions(indent=" " * args.indent))
    markup = renderer.render(value)

    if args.output:
        args.output.write_text(markup, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(markup), args.output)
    else:
        sys.stdout.write(markup)


if __name__ == "__main__":
    main()
