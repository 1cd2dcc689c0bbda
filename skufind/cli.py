"""
Command-line host: load a report, print its stats, and look up SKUs.

  python -m skufind.cli report.html --sku 101 --sku 205 --xlsx out/matches.xlsx
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from skufind.document import DocumentError
from skufind.models import SKUResult
from skufind.presentation import format_result, no_match_message, report_stats, write_results_excel
from skufind.session import ReportSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find products by SKU in an HTML report")
    parser.add_argument("report", help="Report HTML file")
    parser.add_argument("--sku", action="append", default=[], help="SKU to look up (repeatable)")
    parser.add_argument("--xlsx", default=None, help="Write all matches to this Excel file")
    parser.add_argument("--encoding", default=None, help="Report file encoding (default: $SKUFIND_ENCODING or utf-8)")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress lines")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    session = ReportSession(encoding=args.encoding, verbose=not args.quiet)

    try:
        report = session.load_file(args.report)
    except (FileNotFoundError, DocumentError) as e:
        print(f"ERROR: {e}", file=sys.stderr, flush=True)
        return 1

    stats = report_stats(session)
    print(f"Loaded: {report.source_name}")
    print(f"Sections: {stats['sections']}  Products: {stats['products']}")
    if report.discarded_products:
        print(f"Ignored {report.discarded_products} product row(s) with no closing 'Total:' row")

    all_matches: List[SKUResult] = []
    for q in args.sku:
        results = session.search(q)
        print(f"\n{'='*60}")
        print(f"SKU {session.query}: {len(results)} match(es)")
        print(f"{'='*60}")
        if not results and session.query:
            print(no_match_message(session.query))
        for r in results:
            print(format_result(r))
            print()
        all_matches.extend(results)

    if args.xlsx:
        out = write_results_excel(all_matches, args.xlsx)
        print(f"Wrote {len(all_matches)} match(es) to {out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
