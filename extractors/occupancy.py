"""
OccupancyTracker — grid positions reserved by in-flight row spans.

A cell with ``rowspan > 1`` claims its column range in each of the
following ``rowspan - 1`` rows.  Cells placed later in those rows are
pushed right past every claim at or before their position, which keeps
the grid collision-free without ever failing on overlap.

Claims only ever point forward, so rows must be fed in document order.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Set


class OccupancyTracker:
    """Per-table map of ``row index → claimed column indexes``."""

    def __init__(self) -> None:
        self._claims: Dict[int, Set[int]] = {}

    def claimed(self, row: int) -> FrozenSet[int]:
        return frozenset(self._claims.get(row, ()))

    def resolve_column(self, row: int, tentative: int) -> int:
        """
        Shift *tentative* right by the number of claims at or before it.

        Each pass counts claims that became reachable after the previous
        shift; it stops once a pass finds nothing new.  At most one pass
        per claim, since every pass absorbs at least one.
        """
        claims = self._claims.get(row)
        if not claims:
            return tentative

        col = tentative
        absorbed: Set[int] = set()
        while True:
            reached = {c for c in claims if c <= col} - absorbed
            if not reached:
                return col
            col += len(reached)
            absorbed |= reached

    def claim(self, row: int, col: int, row_span: int, col_span: int) -> None:
        """Reserve ``[col, col + col_span - 1]`` in the next ``row_span - 1`` rows."""
        for offset in range(1, row_span):
            self._claims.setdefault(row + offset, set()).update(range(col, col + col_span))
