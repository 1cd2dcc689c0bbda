"""Parse sectioned HTML product reports and look products up by SKU."""

from skufind.classifier import classify_row, RowClassification
from skufind.document import DocumentError, ReportDocument, Row, load_report_html, parse_document
from skufind.models import ProductEntry, Section, SKUIndex, SKUResult
from skufind.segmenter import SegmentationResult, segment_rows, segment_rows_detailed
from skufind.session import ParsedReport, ReportSession, build_report
from skufind.sku_index import build_sku_index, lookup_sku

__all__ = [
    "classify_row",
    "RowClassification",
    "DocumentError",
    "ReportDocument",
    "Row",
    "load_report_html",
    "parse_document",
    "ProductEntry",
    "Section",
    "SKUIndex",
    "SKUResult",
    "SegmentationResult",
    "segment_rows",
    "segment_rows_detailed",
    "ParsedReport",
    "ReportSession",
    "build_report",
    "build_sku_index",
    "lookup_sku",
]
