"""
Detectors for explicit type-override attributes on a cell.

    <td string>00123</td>          keep as text, no inference
    <td double>1,234.5</td>        number, thousands separators removed
    <td formula>=SUM(A1:A3)</td>   formula, leading "=" removed
    <td url="https://...">x</td>   hyperlink to the attribute value
    <td email="mailto:...">x</td>  e-mail link to the attribute value
    <td dropDownList>a,b,c</td>    drop-down list cell

Only consulted for cells with non-blank text.
"""

from __future__ import annotations

from detection.base import ContentDetector
from detection.constants import (
    ATTR_DOUBLE,
    ATTR_DROP_DOWN_LIST,
    ATTR_EMAIL,
    ATTR_FORMULA,
    ATTR_STRING,
    ATTR_URL,
    FORMULA_PREFIX,
)
from dto.cell_content import CellContent
from dto.table import ContentType
from utils.element import Element


class StringOverrideDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        # Claiming the cell is the whole point: it stops numeric/boolean inference.
        return element.has_attr(ATTR_STRING)


class DoubleOverrideDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        if not element.has_attr(ATTR_DOUBLE):
            return False
        content.content_type = ContentType.DOUBLE
        content.content = (content.content or "").replace(",", "")
        return True


class FormulaOverrideDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        if not element.has_attr(ATTR_FORMULA):
            return False
        formula = (content.content or "").strip()
        if formula.startswith(FORMULA_PREFIX):
            formula = formula[len(FORMULA_PREFIX):]
        content.is_formula = True
        content.content = formula
        return True


class UrlOverrideDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        if not element.has_attr(ATTR_URL):
            return False
        content.content_type = ContentType.LINK_URL
        content.link = element.attr(ATTR_URL) or ""
        return True


class EmailOverrideDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        if not element.has_attr(ATTR_EMAIL):
            return False
        content.content_type = ContentType.LINK_EMAIL
        content.link = element.attr(ATTR_EMAIL) or ""
        return True


class DropDownListOverrideDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        if not element.has_attr(ATTR_DROP_DOWN_LIST):
            return False
        content.content_type = ContentType.DROP_DOWN_LIST
        return True
