"""
Inline-style parsing and the top-down style cascade.

Only flat ``style="name: value; ..."`` maps are handled; there is no
selector matching.  The cascade is "nearest ancestor wins": a
descendant's own declarations override same-named inherited ones and
everything else passes through unchanged.
"""

from __future__ import annotations

from typing import Dict, Hashable, Mapping, Optional, Tuple

from utils.element import Element

PropertyMap = Dict[str, str]

# node key -> (node, resolved style); the node is held so its key stays unique
StyleCache = Dict[Hashable, Tuple[Element, PropertyMap]]


def parse_style(element: Element) -> PropertyMap:
    """Return the element's inline ``style`` declarations as a dict."""
    raw = element.attr("style")
    if not raw:
        return {}

    style: PropertyMap = {}
    for declaration in raw.split(";"):
        name, sep, value = declaration.partition(":")
        if not sep:
            continue
        name = name.strip().lower()
        value = value.strip()
        if name and value:
            style[name] = value
    return style


def mix_style(base: Mapping[str, str], override: Mapping[str, str]) -> PropertyMap:
    """Merge *override* over *base* into a new dict."""
    mixed = dict(base)
    mixed.update(override)
    return mixed


class StyleCascade:
    """
    Resolves cascaded styles, memoising ancestor (row-group) merges.

    The cache is an ordinary dict keyed by ``Element.key``; each entry also
    holds the element itself, so a key cannot be reused by another node
    while the entry exists.  It is normally scoped to one table.  A cache
    supplied by the caller grows with every element it sees and should be
    scoped to one document.  Sharing one across threads is safe because
    entries are only ever added with ``setdefault`` and a duplicate
    computation for the same key yields an identical value.
    """

    def __init__(self, cache: Optional[StyleCache] = None):
        self.cache: StyleCache = cache if cache is not None else {}

    def resolve(self, element: Element, inherited: Mapping[str, str]) -> PropertyMap:
        """Merge the element's own style over *inherited* (not memoised)."""
        return mix_style(inherited, parse_style(element))

    def resolve_ancestor(self, element: Element, inherited: Mapping[str, str]) -> PropertyMap:
        """Like ``resolve`` but computed once per element."""
        cached = self.cache.get(element.key)
        if cached is None:
            cached = self.cache.setdefault(
                element.key, (element, self.resolve(element, inherited))
            )
        return cached[1]
