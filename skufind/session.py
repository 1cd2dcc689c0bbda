"""
Host-side state for one loaded report.

A session owns the current (sections, index) snapshot plus the last query and
its results. Loading a report computes a complete new snapshot and swaps it
in with one assignment; searching recomputes the results. If loading fails,
the previous snapshot is left in place and the error propagates.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from skufind.document import load_report_html, parse_document, ReportDocument
from skufind.models import Section, SKUIndex, SKUResult, trim_text
from skufind.segmenter import segment_rows_detailed
from skufind.sku_index import build_sku_index, lookup_sku


@dataclass(frozen=True)
class ParsedReport:
    """Everything derived from one parse pass."""
    sections: List[Section] = field(default_factory=list)
    index: SKUIndex = field(default_factory=dict)
    discarded_products: int = 0
    source_name: str = ""

    @property
    def total_products(self) -> int:
        return sum(len(s.products) for s in self.sections)


def build_report(document: ReportDocument, *, source_name: str = "", verbose: bool = False) -> ParsedReport:
    seg = segment_rows_detailed(document.iter_rows(), verbose=verbose)
    index = build_sku_index(seg.sections)
    return ParsedReport(
        sections=seg.sections,
        index=index,
        discarded_products=seg.discarded_products,
        source_name=source_name,
    )


class ReportSession:
    def __init__(self, *, encoding: Optional[str] = None, verbose: bool = False) -> None:
        self.encoding = encoding
        self.verbose = verbose
        self.report = ParsedReport()
        self.query = ""
        self.results: Sequence[SKUResult] = ()

    @property
    def sections(self) -> List[Section]:
        return self.report.sections

    @property
    def index(self) -> SKUIndex:
        return self.report.index

    @property
    def loaded(self) -> bool:
        return bool(self.report.sections)

    def _publish(self, document: ReportDocument, source_name: str) -> ParsedReport:
        report = build_report(document, source_name=source_name, verbose=self.verbose)
        # single swap: readers see either the old snapshot or this one
        self.report = report
        self.query = ""
        self.results = ()
        if self.verbose:
            label = source_name or "report"
            print(
                f"[skufind] Loaded {label}: {len(report.sections)} sections, "
                f"{report.total_products} products, {len(report.index)} distinct SKUs",
                flush=True,
            )
        return report

    def load_html(self, raw: Union[str, bytes], *, source_name: str = "") -> ParsedReport:
        """Parse raw report HTML and replace the session state."""
        document = parse_document(raw, encoding=self.encoding)
        return self._publish(document, source_name)

    def load_file(self, path: Union[str, Path]) -> ParsedReport:
        path = Path(path)
        document = load_report_html(path, encoding=self.encoding)
        return self._publish(document, path.name)

    def search(self, query: Optional[str]) -> Sequence[SKUResult]:
        """Run an exact SKU lookup and remember it as the current query."""
        self.query = trim_text(query)
        self.results = lookup_sku(self.report.index, self.query)
        if self.verbose:
            print(f"[skufind] Search '{self.query}': {len(self.results)} match(es)", flush=True)
        return self.results
