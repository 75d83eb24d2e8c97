"""
Small numeric helpers for span attributes, CSS lengths and text width.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

_LENGTH_RE = re.compile(r"^([-+]?(?:\d+(?:\.\d*)?|\.\d+))\s*(px|pt)?$", re.IGNORECASE | re.ASCII)


def parse_span(value: Optional[str]) -> int:
    """``colspan`` / ``rowspan`` value → int ≥ 1 (1 when absent or unparsable)."""
    if value is None:
        return 1
    try:
        span = int(value.strip())
    except ValueError:
        return 1
    return span if span > 1 else 1


def parse_length(value: Optional[str]) -> Optional[int]:
    """
    Parse a CSS length such as ``"20"``, ``"20px"`` or ``"12.5pt"``.

    The unit is dropped and decimals are truncated.  Returns ``None`` for
    anything else (``auto``, percentages, ems ...).
    """
    if not value:
        return None
    m = _LENGTH_RE.match(value.strip())
    if not m:
        return None
    return int(float(m.group(1)))


def _char_width(ch: str) -> int:
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def string_width(text: Optional[str]) -> int:
    """Display width of the widest line; wide (CJK) characters count twice."""
    if not text:
        return 0
    return max(sum(_char_width(ch) for ch in line) for line in text.split("\n"))
