"""
Base class for all cell-content detectors.

Each detector inspects a cell element and, if the cell matches its type,
fills the ``CellContent`` draft and returns ``True``.  Detectors are
evaluated in a fixed order and the first one that returns ``True`` ends
the chain, so a detector must leave the draft untouched when it returns
``False``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dto.cell_content import CellContent
from utils.element import Element


class ContentDetector(ABC):
    """Interface that every content detector must implement."""

    @abstractmethod
    def detect(self, element: Element, content: CellContent) -> bool:
        """
        Classify the cell if it matches this detector's type.

        Returns ``True`` when the cell was claimed (stop the chain),
        ``False`` to let the next detector run.
        """
        ...
