"""HTML adapter: rows and cells from report markup."""
import pytest

import skufind.document as document
from skufind.document import DocumentError, parse_document, load_report_html, resolve_encoding
from skufind.session import ReportSession


HTML = (
    "<html><body><table>"
    "<tr><th>Group</th><th>SKU</th><th>Name</th></tr>"
    "<tr><td></td><td> 101 </td><td><b>Widget</b> A</td><td>5</td></tr>"
    "<tr><td>Hardware Total:</td><td></td><td></td><td>5</td></tr>"
    "</table></body></html>"
)

CP1252_REPORT = (
    "<table><tr><td></td><td>5</td><td>Café</td></tr>"
    "<tr><td>Drinks Total:</td></tr></table>"
).encode("cp1252")


class TestParseDocument:
    def test_rows_in_document_order(self):
        rows = parse_document(HTML).rows()
        assert len(rows) == 3

    def test_only_td_cells_are_counted(self):
        header = parse_document(HTML).rows()[0]
        assert header.cells == ()
        assert header.text == "GroupSKUName"

    def test_cell_text_includes_nested_markup(self):
        product = parse_document(HTML).rows()[1]
        assert product.cells == ("", " 101 ", "Widget A", "5")

    def test_bytes_input(self):
        rows = parse_document(HTML.encode("utf-8")).rows()
        assert rows[2].cells[0] == "Hardware Total:"

    def test_no_tables_gives_no_rows(self):
        assert parse_document("<p>nothing here</p>").rows() == []
        assert parse_document("").rows() == []

    def test_truncated_markup_is_best_effort(self):
        rows = parse_document("<table><tr><td>a</td><td>1</td><td>b").rows()
        assert rows[0].cells == ("a", "1", "b")


class TestAdapterFailures:
    def test_non_text_input(self):
        with pytest.raises(DocumentError):
            parse_document(None)
        with pytest.raises(DocumentError):
            parse_document(12345)

    def test_parser_failure_is_wrapped(self, monkeypatch):
        def boom(*args, **kwargs):
            raise ValueError("bad input")

        monkeypatch.setattr(document, "BeautifulSoup", boom)
        with pytest.raises(DocumentError) as exc:
            parse_document("<table></table>")
        assert isinstance(exc.value.__cause__, ValueError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_report_html(tmp_path / "missing.html")

    def test_load_from_file(self, tmp_path):
        p = tmp_path / "report.html"
        p.write_text(HTML, encoding="utf-8")
        assert len(load_report_html(p).rows()) == 3


class TestByteDecoding:
    """Bytes input: bad bytes, explicit encodings, $SKUFIND_ENCODING."""

    def test_invalid_byte_inside_sku_is_not_a_product(self):
        s = ReportSession()
        s.load_html(
            b"<table><tr><td></td><td>1\xff01</td><td>Corrupt</td></tr>"
            b"<tr><td>Parts Total:</td></tr></table>"
        )
        assert list(s.search("101")) == []
        assert [x.category_name for x in s.sections] == ["Parts"]
        assert s.sections[0].products == ()

    def test_invalid_byte_inside_marker_is_not_a_terminator(self):
        s = ReportSession()
        report = s.load_html(
            b"<table><tr><td></td><td>7</td><td>Bolt</td></tr>"
            b"<tr><td>Parts Tot\xffal:</td></tr></table>"
        )
        assert report.sections == []
        assert report.discarded_products == 1
        assert list(s.search("7")) == []

    def test_replacement_character_is_kept_in_cell(self):
        row = parse_document(b"<table><tr><td>a\xffb</td></tr></table>").rows()[0]
        assert row.cells == ("a\ufffdb",)

    def test_session_encoding(self):
        s = ReportSession(encoding="cp1252")
        s.load_html(CP1252_REPORT)
        assert s.search("5")[0].product.name == "Café"

    def test_encoding_from_environment(self, monkeypatch):
        monkeypatch.setenv("SKUFIND_ENCODING", "cp1252")
        assert resolve_encoding() == "cp1252"
        row = parse_document(CP1252_REPORT).rows()[0]
        assert row.cells[2] == "Café"

    def test_explicit_encoding_beats_environment(self, monkeypatch):
        monkeypatch.setenv("SKUFIND_ENCODING", "cp1252")
        row = parse_document("<table><tr><td>é</td></tr></table>".encode("utf-8"), encoding="utf-8").rows()[0]
        assert row.cells == ("é",)

    def test_default_is_utf8(self, monkeypatch):
        monkeypatch.delenv("SKUFIND_ENCODING", raising=False)
        assert resolve_encoding() == "utf-8"

    def test_unknown_encoding(self):
        with pytest.raises(DocumentError):
            parse_document(b"<table></table>", encoding="no-such-codec")
