"""Typed records produced by one parse pass over a report."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

# Whitespace removed by a DOM String.prototype.trim(): ASCII space/tab/line breaks,
# NBSP, BOM and the Unicode Zs separators. Unlike str.strip(), \x1c-\x1f and \x85 are kept.
TRIM_CHARS = (
    " \t\n\v\f\r\xa0\ufeff\u1680\u2028\u2029\u202f\u205f\u3000"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)


def trim_text(s: str) -> str:
    return (s or "").strip(TRIM_CHARS)


@dataclass(frozen=True)
class ProductEntry:
    """One product row from the report."""
    sku: str                     # digits only
    name: str
    columns: Tuple[str, ...]     # every cell of the source row, trimmed


@dataclass(frozen=True)
class Section:
    """A run of product rows closed by one "Total:" row."""
    category_name: str
    products: Tuple[ProductEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SKUResult:
    category_name: str
    product: ProductEntry


SKUIndex = Dict[str, List[SKUResult]]
