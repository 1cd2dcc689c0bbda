"""
Display helpers for search results: column labels, quick fields, stats, and
an Excel export of the matches.

Dependencies:
  pip install pandas openpyxl
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import pandas as pd

from skufind.models import ProductEntry, SKUResult, trim_text

COLUMN_LABELS = [
    "Group",
    "SKU",
    "Name",
    "Qty",
    "Amount",
    "Col 6",
    "Col 7",
    "Qty (2)",
    "Amount (2)",
]

# (label, column index) shown on each result card
HIGHLIGHT_FIELDS: List[Tuple[str, int]] = [
    ("Qty", 3),
    ("Amount", 4),
    ("Qty (2)", 7),
    ("Amount (2)", 8),
]

MISSING = "-"


def column_label(idx: int) -> str:
    if 0 <= idx < len(COLUMN_LABELS):
        return COLUMN_LABELS[idx]
    return f"Col {idx + 1}"


def labeled_columns(product: ProductEntry) -> List[Tuple[str, str]]:
    """Full column dump: (label, value) with empty values shown as '-'."""
    return [(column_label(i), v or MISSING) for i, v in enumerate(product.columns)]


def result_highlights(result: SKUResult) -> List[Tuple[str, str]]:
    cols = result.product.columns
    # only a missing column falls back; an empty cell is shown as-is
    return [(label, cols[i] if i < len(cols) else MISSING) for label, i in HIGHLIGHT_FIELDS]


def report_stats(session) -> Dict[str, int]:
    return {
        "sections": len(session.report.sections),
        "products": session.report.total_products,
        "matches": len(session.results),
    }


def no_match_message(query: str) -> str:
    return f"No matches found for {trim_text(query)}."


def format_result(result: SKUResult) -> str:
    p = result.product
    lines = [result.category_name, p.name, f"SKU {p.sku}"]
    lines.append("  ".join(f"{label}: {val}" for label, val in result_highlights(result)))
    width = max((len(label) for label, _ in labeled_columns(p)), default=0)
    for label, val in labeled_columns(p):
        lines.append(f"  {label.ljust(width)}  {val}")
    return "\n".join(lines)


# ----------------------------
# Tabular export
# ----------------------------

def results_to_frame(results: Iterable[SKUResult]) -> pd.DataFrame:
    """One row per match: the category, then every source column under its label."""
    records: List[Dict[str, Any]] = []
    labels: List[str] = []
    for r in results:
        rec: Dict[str, Any] = {"Category": r.category_name}
        for i, v in enumerate(r.product.columns):
            lab = column_label(i)
            if lab not in labels:
                labels.append(lab)
            rec[lab] = v
        records.append(rec)
    return pd.DataFrame(records, columns=["Category"] + labels)


def write_results_excel(results: Sequence[SKUResult], out_path: Path, *, sheet_name: str = "Matches") -> Path:
    out_path = Path(out_path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df = results_to_frame(results)

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        worksheet = writer.sheets[sheet_name]

        from openpyxl.styles import Alignment, Font, PatternFill
        from openpyxl.utils import get_column_letter

        for idx, col in enumerate(df.columns, 1):
            longest = df[col].astype(str).map(len).max() if len(df) else 0
            worksheet.column_dimensions[get_column_letter(idx)].width = max(longest, len(col)) + 2

        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
        header_font = Font(bold=True, color="FFFFFF")
        for cell in worksheet[1]:
            cell.fill = header_fill
            cell.font = header_font
            cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)

    return out_path
