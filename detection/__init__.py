"""
Cell-content detectors.

Each detector implements the ``ContentDetector`` base class.  The
evaluation order is a contract — the first detector that claims a cell
wins:

  Embedded (checked before any text is read)
    1. ImageDetector               — ``<img>`` inside the cell
    2. LinkDetector                — ``<a>`` inside the cell

  Text (only for cells whose text is not blank)
    3. StringOverrideDetector      — ``string`` attribute
    4. DoubleOverrideDetector      — ``double`` attribute
    5. FormulaOverrideDetector     — ``formula`` attribute
    6. UrlOverrideDetector         — ``url`` attribute
    7. EmailOverrideDetector       — ``email`` attribute
    8. DropDownListOverrideDetector — ``dropDownList`` attribute
    9. BooleanDetector             — exactly ``true`` / ``false``
   10. NumberDetector              — numeric literal

Anything left unclaimed is TEXT.
"""

from typing import List

from detection.base import ContentDetector
from detection.embedded import ImageDetector, LinkDetector
from detection.literal import BooleanDetector, NumberDetector
from detection.overrides import (
    DoubleOverrideDetector,
    DropDownListOverrideDetector,
    EmailOverrideDetector,
    FormulaOverrideDetector,
    StringOverrideDetector,
    UrlOverrideDetector,
)

EMBEDDED_DETECTORS: List[ContentDetector] = [
    ImageDetector(),
    LinkDetector(),
]

TEXT_DETECTORS: List[ContentDetector] = [
    StringOverrideDetector(),
    DoubleOverrideDetector(),
    FormulaOverrideDetector(),
    UrlOverrideDetector(),
    EmailOverrideDetector(),
    DropDownListOverrideDetector(),
    BooleanDetector(),
    NumberDetector(),
]

__all__ = [
    "ContentDetector",
    "EMBEDDED_DETECTORS",
    "TEXT_DETECTORS",
    "ImageDetector",
    "LinkDetector",
    "StringOverrideDetector",
    "DoubleOverrideDetector",
    "FormulaOverrideDetector",
    "UrlOverrideDetector",
    "EmailOverrideDetector",
    "DropDownListOverrideDetector",
    "BooleanDetector",
    "NumberDetector",
]
