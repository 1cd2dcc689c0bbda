"""SKU index build and exact-match lookup."""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from skufind.models import Section, SKUIndex, SKUResult, trim_text

_EMPTY: Sequence[SKUResult] = ()


def build_sku_index(sections: Iterable[Section]) -> SKUIndex:
    """
    Map every SKU to each (section, product) occurrence, in document order.

    No dedup: a SKU listed twice in one section, or in several sections,
    gets one entry per listing.
    """
    index: Dict[str, List[SKUResult]] = {}
    for section in sections:
        for product in section.products:
            index.setdefault(product.sku, []).append(
                SKUResult(category_name=section.category_name, product=product)
            )
    return index


def lookup_sku(index: SKUIndex, query: str) -> Sequence[SKUResult]:
    """
    Exact, case-sensitive lookup after trimming the query.

    Returns the index's own list for a hit (callers must not mutate it) and an
    empty tuple for a blank or unknown query.
    """
    key = trim_text(query)
    if not key:
        return _EMPTY
    return index.get(key, _EMPTY)
