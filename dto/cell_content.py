"""
CellContent: the draft every content detector receives.

Detectors fill it in place; the table extractor copies the final values
into a frozen ``Td`` once the cell's grid position is known.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from dto.table import ContentType, Font


class CellContent(BaseModel):
    content_type: ContentType = ContentType.TEXT
    content: Optional[str] = None
    link: Optional[str] = None
    file: Optional[Path] = None
    fonts: Optional[List[Font]] = None
    is_formula: bool = False

    @property
    def is_blank(self) -> bool:
        return self.content is None or not self.content.strip()
