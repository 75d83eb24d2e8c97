"""
Resolved table DTOs.

    Table
      └─ rows: List[Tr]
           └─ cells: List[Td]
                └─ fonts: List[Font]   (rich-text runs, optional)

Every ``Td`` carries its absolute, span-resolved grid position, so the
spreadsheet writer never has to reason about ``colspan`` / ``rowspan``
again.  All models are frozen once built.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from openpyxl.utils import get_column_letter
from pydantic import BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    """Semantic type of a cell's payload, used to pick the cell format."""

    TEXT = "text"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    LINK_URL = "link_url"
    LINK_EMAIL = "link_email"
    IMAGE = "image"
    DROP_DOWN_LIST = "drop_down_list"

    @classmethod
    def is_link(cls, content_type: Optional["ContentType"]) -> bool:
        return content_type in (cls.LINK_URL, cls.LINK_EMAIL)


class Font(BaseModel):
    """A styled character range ``[start_index, end_index)`` of a cell's text."""

    model_config = ConfigDict(frozen=True)

    start_index: int
    end_index: int
    style: Dict[str, str] = {}


class Td(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0)
    col: int = Field(ge=0)
    col_span: int = Field(default=1, ge=1)
    row_span: int = Field(default=1, ge=1)
    content_type: ContentType = ContentType.TEXT
    content: Optional[str] = None
    link: Optional[str] = None
    file: Optional[Path] = None
    fonts: Optional[List[Font]] = None
    style: Dict[str, str] = {}
    is_header: bool = False
    is_formula: bool = False

    # ------------------------------------------------------------------
    # Grid helpers for the writer
    # ------------------------------------------------------------------

    @property
    def col_bound(self) -> int:
        """Last (inclusive) column covered by this cell."""
        return self.col + self.col_span - 1

    @property
    def row_bound(self) -> int:
        """Last (inclusive) row covered by this cell."""
        return self.row + self.row_span - 1

    @property
    def coordinate(self) -> str:
        """A1-style coordinate of the top-left corner (1-based on the sheet)."""
        return f"{get_column_letter(self.col + 1)}{self.row + 1}"

    @property
    def merge_range(self) -> Optional[str]:
        """``"A1:B2"`` for spanning cells, ``None`` for a plain 1×1 cell."""
        if self.col_span == 1 and self.row_span == 1:
            return None
        bottom_right = f"{get_column_letter(self.col_bound + 1)}{self.row_bound + 1}"
        return f"{self.coordinate}:{bottom_right}"


class Tr(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    height: Optional[int] = None
    visible: bool = True
    cells: List[Td] = []
    # column index → width, computed per row
    col_widths: Dict[int, int] = {}


class Table(BaseModel):
    model_config = ConfigDict(frozen=True)

    caption: Optional[str] = None
    rows: List[Tr] = []

    def column_widths(self) -> Dict[int, int]:
        """Widest value seen for each column across every row."""
        widths: Dict[int, int] = {}
        for tr in self.rows:
            for col, width in tr.col_widths.items():
                if width > widths.get(col, -1):
                    widths[col] = width
        return dict(sorted(widths.items()))
