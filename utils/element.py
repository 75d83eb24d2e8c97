"""
Read-only view of a parsed HTML element.

Everything downstream of document loading (style cascade, content
detection, grid resolution) talks to this interface only, so any HTML
parsing library can be plugged in by writing one adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, List, Optional


class Element(ABC):
    """Interface that every element adapter must implement."""

    @property
    @abstractmethod
    def tag(self) -> str:
        """Lower-case tag name (``"td"``, ``"span"`` ...)."""
        ...

    @property
    @abstractmethod
    def key(self) -> Hashable:
        """
        Identity of the underlying node.

        Two adapters wrapping the same node must return equal keys; two
        distinct nodes must not, even when their markup is identical.
        """
        ...

    @property
    @abstractmethod
    def parent(self) -> Optional["Element"]:
        ...

    @abstractmethod
    def children(self) -> List["Element"]:
        """Direct child elements in document order (text nodes excluded)."""
        ...

    @abstractmethod
    def find_all(self, tag: str) -> List["Element"]:
        """All descendants with the given tag, in document order."""
        ...

    @abstractmethod
    def text(self) -> str:
        """Whitespace-normalised text of this element and its descendants."""
        ...

    @abstractmethod
    def attr(self, name: str) -> Optional[str]:
        """Attribute value, or ``None`` when the attribute is absent."""
        ...

    @abstractmethod
    def has_attr(self, name: str) -> bool:
        ...

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------

    def first(self, tag: str) -> Optional["Element"]:
        found = self.find_all(tag)
        return found[0] if found else None

    def closest(self, tag: str) -> Optional["Element"]:
        """Nearest ancestor (excluding self) with the given tag."""
        node = self.parent
        while node is not None:
            if node.tag == tag:
                return node
            node = node.parent
        return None
