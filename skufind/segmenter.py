"""Group product rows into sections closed by "Total:" rows."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from skufind.classifier import PRODUCT, TERMINATOR, classify_row
from skufind.document import Row
from skufind.models import ProductEntry, Section


@dataclass(frozen=True)
class SegmentationResult:
    sections: List[Section]
    discarded_products: int      # product rows after the last terminator


def segment_rows_detailed(rows: Iterable[Row], *, verbose: bool = False) -> SegmentationResult:
    """
    Single forward pass over the rows.

    Products accumulate in an open buffer until a terminator closes it into a
    Section (empty sections are kept). Products still open when the rows run
    out never saw a terminator and are dropped: only terminated groups count.
    """
    sections: List[Section] = []
    current: List[ProductEntry] = []

    for row in rows:
        c = classify_row(row)
        if c.kind == TERMINATOR:
            sections.append(Section(category_name=c.category_name or "", products=tuple(current)))
            current = []
        elif c.kind == PRODUCT:
            current.append(c.product)

    if current and verbose:
        print(
            f"[skufind] Dropping {len(current)} product row(s) after the last 'Total:' row",
            flush=True,
        )
    return SegmentationResult(sections=sections, discarded_products=len(current))


def segment_rows(rows: Iterable[Row], *, verbose: bool = False) -> List[Section]:
    return segment_rows_detailed(rows, verbose=verbose).sections
