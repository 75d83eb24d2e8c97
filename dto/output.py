"""
Top-level output DTO for the final JSON document model.

    DocumentResult
      └─ tables: List[Table]
           └─ rows: List[Tr]
                └─ cells: List[Td]
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from dto.table import Table


class DocumentResult(BaseModel):
    """Top-level output for an entire HTML document."""

    file_name: str
    tables: List[Table] = []
