"""Render HTML search responses as wrapped terminal text."""

from __future__ import annotations

import textwrap

import httpx
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

DEFAULT_WIDTH = 80
REPLACEMENT_PLACEHOLDER = "<?>"

GLYPH_REPLACEMENTS: dict[str, str] = {
    "\u2500": "-",
    "\u2502": "|",
    "\u253c": "+",
    "\ufffd": REPLACEMENT_PLACEHOLDER,
}

_SKIP_TAGS = {"script", "style", "head", "noscript", "template"}
_HEADING_LEVELS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}
_CELL_TAGS = {"td", "th"}
_BLOCK_TAGS = {
    "address",
    "article",
    "aside",
    "blockquote",
    "body",
    "caption",
    "dd",
    "details",
    "div",
    "dl",
    "dt",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "header",
    "hr",
    "html",
    "main",
    "nav",
    "ol",
    "p",
    "section",
    "summary",
    "table",
    "tbody",
    "tfoot",
    "thead",
    "tr",
    "ul",
}
_LINE_BREAKING_TAGS = _BLOCK_TAGS | set(_HEADING_LEVELS) | {"br", "li", "pre"}


def parse_width(value: object, default: int = DEFAULT_WIDTH) -> int:
    """Parse a ``COLUMNS``-style width hint; missing or non-positive values give ``default``."""
    if value is None:
        return default
    try:
        width = int(str(value).strip())
    except ValueError:
        return default
    return width if width > 0 else default


def normalize_glyphs(text: str) -> str:
    """Replace box-drawing glyphs with ASCII and mark undecodable characters."""
    for glyph, replacement in GLYPH_REPLACEMENTS.items():
        text = text.replace(glyph, replacement)
    return text


class _TextLayout:
    """Accumulates inline text and emits wrapped blocks."""

    def __init__(self, width: int):
        self.width = width
        self.lines: list[str] = []
        self.links: list[str] = []
        self.cell_depth = 0
        self._inline: list[str] = []
        self._pending_prefix = ""
        self._indent = ""
        self._indents: list[str] = []

    def text(self, value: str) -> None:
        self._inline.append(value)

    def flush(self) -> None:
        collapsed = " ".join("".join(self._inline).split())
        self._inline.clear()
        if not collapsed:
            return
        initial = self._pending_prefix or self._indent
        self._pending_prefix = ""
        self.lines.append(
            textwrap.fill(
                collapsed,
                width=self.width,
                initial_indent=initial,
                subsequent_indent=self._indent,
                break_long_words=True,
                break_on_hyphens=False,
            )
        )

    def open_marked(self, marker: str) -> None:
        """Start a block whose first line carries ``marker``."""
        self.flush()
        self._indents.append(self._indent)
        self._pending_prefix = self._indent + marker
        self._indent = " " * len(self._pending_prefix)

    def close_marked(self) -> None:
        self.flush()
        self._pending_prefix = ""
        self._indent = self._indents.pop()

    def verbatim(self, value: str) -> None:
        self.flush()
        value = value.strip("\n")
        if value:
            self.lines.append(value)

    def link(self, href: str) -> None:
        self.links.append(href)
        self.text(f"[{len(self.links)}]")

    def result(self) -> str:
        self.flush()
        parts = list(self.lines)
        if self.links:
            parts.append("")
            parts.extend(f"[{i}]: {href}" for i, href in enumerate(self.links, start=1))
        return "\n".join(parts)


def _walk(node: Tag, layout: _TextLayout) -> None:
    for child in node.children:
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            layout.text(str(child))
            continue
        if not isinstance(child, Tag):
            continue

        name = child.name
        if name in _SKIP_TAGS:
            continue
        if name == "a":
            _walk(child, layout)
            href = (child.get("href") or "").strip()
            if href and not href.startswith(("#", "javascript:")):
                layout.link(href)
        elif name in _CELL_TAGS:
            layout.cell_depth += 1
            _walk(child, layout)
            layout.cell_depth -= 1
            layout.text(" ")
        elif layout.cell_depth and name in _LINE_BREAKING_TAGS:
            # a row stays on one line
            layout.text(" ")
            _walk(child, layout)
            layout.text(" ")
        elif name == "br":
            layout.flush()
        elif name == "pre":
            layout.verbatim(child.get_text())
        elif name in _HEADING_LEVELS:
            layout.open_marked("#" * _HEADING_LEVELS[name] + " ")
            _walk(child, layout)
            layout.close_marked()
        elif name == "li":
            layout.open_marked("* ")
            _walk(child, layout)
            layout.close_marked()
        elif name in _BLOCK_TAGS:
            layout.flush()
            _walk(child, layout)
            layout.flush()
        else:
            _walk(child, layout)


def html_to_text(html: str, width: int = DEFAULT_WIDTH) -> str:
    """
    Convert an HTML document to plain text wrapped to ``width`` columns.

    Args:
        html: Markup to convert.
        width: Target column width; values below 1 are treated as 1.

    Returns:
        Plain text, with hyperlink targets listed after the body.
    """
    soup = BeautifulSoup(html, "html.parser")
    layout = _TextLayout(max(width, 1))
    _walk(soup, layout)
    return layout.result()


def render_html(response: httpx.Response, width: int) -> str:
    """Default renderer: decode, lay out and normalize a response body."""
    return normalize_glyphs(html_to_text(response.text, width))
