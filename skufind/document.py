"""
Document adapter: turn report HTML into an ordered stream of table rows.

This is the only module that touches markup. Everything downstream works on
`Row` objects (cell texts plus the row's concatenated text), so any parser that
can produce that shape would do; we use BeautifulSoup with lxml.

Dependencies:
  pip install beautifulsoup4 lxml
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

DEFAULT_ENCODING = "utf-8"
ENCODING_ENV_VAR = "SKUFIND_ENCODING"
HTML_PARSER = "lxml"


class DocumentError(RuntimeError):
    pass


def resolve_encoding(encoding: Optional[str] = None) -> str:
    """Explicit encoding, else $SKUFIND_ENCODING, else utf-8."""
    return encoding or os.getenv(ENCODING_ENV_VAR) or DEFAULT_ENCODING


@dataclass(frozen=True)
class Row:
    """One <tr>: its <td> texts (untrimmed) and the full row text."""
    cells: Tuple[str, ...]
    text: str

    @classmethod
    def from_cells(cls, cells) -> "Row":
        """Build a row from plain strings; text is the cells joined with no separator."""
        cells = tuple("" if c is None else str(c) for c in cells)
        return cls(cells=cells, text="".join(cells))


def _row_from_tag(tr: Tag) -> Row:
    # Descendant <td>s, nested tables included, matching a DOM querySelectorAll("td").
    cells = tuple(td.get_text() for td in tr.find_all("td"))
    return Row(cells=cells, text=tr.get_text())


@dataclass
class ReportDocument:
    """Parsed report. Only exposes rows; the soup stays private."""
    _soup: BeautifulSoup

    def iter_rows(self) -> Iterator[Row]:
        for tr in self._soup.find_all("tr"):
            yield _row_from_tag(tr)

    def rows(self) -> List[Row]:
        return list(self.iter_rows())


def _decode(raw: Union[str, bytes], encoding: Optional[str]) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        enc = resolve_encoding(encoding)
        try:
            # undecodable bytes become U+FFFD so they can never complete a SKU or marker
            return bytes(raw).decode(enc, errors="replace")
        except LookupError as e:
            raise DocumentError(f"Unknown report encoding: {enc}") from e
    raise DocumentError(f"Expected report text or bytes, got {type(raw).__name__}")


def parse_document(raw: Union[str, bytes], *, encoding: Optional[str] = None) -> ReportDocument:
    """
    Parse raw report text into a ReportDocument.

    Malformed markup is tolerated (lxml recovers what it can and the document
    simply has fewer rows). Raises DocumentError only when no document can be
    built at all.
    """
    text = _decode(raw, encoding)
    try:
        soup = BeautifulSoup(text, HTML_PARSER)
    except Exception as e:
        raise DocumentError(f"Failed to parse report HTML: {e}") from e
    return ReportDocument(soup)


def load_report_html(path: Path, *, encoding: Optional[str] = None) -> ReportDocument:
    """Read a report file from disk and parse it."""
    path = Path(path).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Report file not found: {path}")
    return parse_document(path.read_bytes(), encoding=encoding)
