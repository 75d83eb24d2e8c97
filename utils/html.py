"""
HTML loading on top of BeautifulSoup.

``load_document`` parses markup with the ``lxml`` parser, marks explicit
line breaks so they survive whitespace normalisation, keeps block-level
elements from running into each other's text, and returns the
document wrapped in ``SoupElement`` — the ``Element`` adapter the rest of
the package works against.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Hashable, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from utils.element import Element

logger = logging.getLogger(__name__)

# Literal two-character marker standing in for a line break until the
# cell text has been whitespace-normalised.
LINE_FEED_MARKER = "\\n"

# Tags that start a new block of text; their text is kept apart from the
# text around them.  ``<p>`` is handled by the line-break marker instead.
BLOCK_TAGS = (
    "address", "article", "aside", "blockquote", "caption", "dd", "div",
    "dl", "dt", "figcaption", "figure", "footer", "h1", "h2", "h3", "h4",
    "h5", "h6", "header", "hr", "li", "ol", "pre", "section", "table",
    "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
)


class SoupElement(Element):
    """``Element`` adapter over a BeautifulSoup ``Tag``."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def __repr__(self) -> str:
        return f"SoupElement(<{self.tag}>)"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupElement) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    @property
    def tag(self) -> str:
        return (self._tag.name or "").lower()

    @property
    def key(self) -> Hashable:
        return id(self._tag)

    @property
    def parent(self) -> Optional[Element]:
        parent = self._tag.parent
        return SoupElement(parent) if parent is not None else None

    def children(self) -> List[Element]:
        return [SoupElement(c) for c in self._tag.children if isinstance(c, Tag)]

    def find_all(self, tag: str) -> List[Element]:
        return [SoupElement(t) for t in self._tag.find_all(tag)]

    def text(self) -> str:
        return " ".join(self._tag.get_text().split())

    def attr(self, name: str) -> Optional[str]:
        attrs = self._tag.attrs
        value = attrs.get(name, attrs.get(name.lower()))
        if value is None:
            return None
        # multi-valued attributes (class, rel ...) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def has_attr(self, name: str) -> bool:
        attrs = self._tag.attrs
        return name in attrs or name.lower() in attrs


def _mark_line_breaks(soup: BeautifulSoup) -> None:
    """Append a marker after every ``<br>``; put one before and a space after every ``<p>``."""
    for br in soup.find_all("br"):
        br.insert_after(LINE_FEED_MARKER)
    for p in soup.find_all("p"):
        p.insert_before(LINE_FEED_MARKER)
        p.insert_after(" ")


def _separate_blocks(soup: BeautifulSoup) -> None:
    """
    Surround block-level elements with a space.

    ``<div>12</div><div>34</div>`` reads as ``12 34``, while inline
    siblings such as ``<b>a</b>b`` still join up as ``ab``.  The extra
    whitespace disappears again when the text is normalised.
    """
    for block in soup.find_all(BLOCK_TAGS):
        block.insert_before(" ")
        block.insert_after(" ")


def load_document(markup: Union[str, bytes]) -> SoupElement:
    """Parse *markup* and return the document root as an ``Element``."""
    if isinstance(markup, bytes):
        soup = BeautifulSoup(markup, "lxml", from_encoding="utf-8")
    else:
        soup = BeautifulSoup(markup, "lxml")
    _mark_line_breaks(soup)
    _separate_blocks(soup)
    return SoupElement(soup)


def load_document_file(path: Union[str, Path]) -> SoupElement:
    """
    Read and parse the HTML file at *path*.

    ``OSError`` (missing / unreadable file) propagates to the caller.
    """
    logger.debug("Reading HTML file: %s", path)
    with open(path, "rb") as f:
        markup = f.read()
    return load_document(markup)


def plain_text(element: Element) -> str:
    """Normalised text of *element* with line-break markers turned into ``\\n``."""
    return element.text().replace(LINE_FEED_MARKER, "\n")
