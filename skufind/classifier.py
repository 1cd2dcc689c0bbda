"""Row classification: terminator ("... Total:") rows, product rows, noise."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from skufind.document import Row
from skufind.models import ProductEntry, trim_text

# Layout of the source report. These are fixed positions, not inferred.
TOTAL_MARKER = "Total:"
SKU_CELL_INDEX = 1
NAME_CELL_INDEX = 2
MIN_PRODUCT_CELLS = 3

SKU_RE = re.compile(r"[0-9]+")

TERMINATOR = "terminator"
PRODUCT = "product"
NOISE = "noise"


@dataclass(frozen=True)
class RowClassification:
    kind: str                                 # "terminator" | "product" | "noise"
    category_name: Optional[str] = None       # terminator only
    product: Optional[ProductEntry] = None    # product only


_NOISE = RowClassification(kind=NOISE)


def _cell(cells: Sequence[str], i: int) -> str:
    if i >= len(cells) or cells[i] is None:
        return ""
    return trim_text(cells[i])


def is_terminator_text(row_text: str) -> bool:
    return TOTAL_MARKER in (row_text or "")


def category_from_first_cell(first_cell: str) -> str:
    """'Hardware Total:' -> 'Hardware'. Only the part before the first marker is kept."""
    return trim_text((first_cell or "").split(TOTAL_MARKER, 1)[0])


def is_sku(value: str) -> bool:
    return bool(SKU_RE.fullmatch(value or ""))


def classify_row(row: Row) -> RowClassification:
    """
    Decide what a row is. The terminator check runs first and wins even if
    the row also has a product shape.
    """
    cells = row.cells

    if is_terminator_text(row.text):
        first = cells[0] if cells else ""
        return RowClassification(kind=TERMINATOR, category_name=category_from_first_cell(first))

    if len(cells) < MIN_PRODUCT_CELLS:
        return _NOISE

    maybe_sku = _cell(cells, SKU_CELL_INDEX)
    if not is_sku(maybe_sku):
        return _NOISE

    product = ProductEntry(
        sku=maybe_sku,
        name=_cell(cells, NAME_CELL_INDEX),
        columns=tuple(_cell(cells, i) for i in range(len(cells))),
    )
    return RowClassification(kind=PRODUCT, product=product)
