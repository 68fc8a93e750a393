"""
Tabular rendering of a point sequence, keyed by mode.

The basic table shows the real line value (fixed decimals), the DDA table
shows the integer grid points.
"""

from typing import List, Tuple

from config import get_active_params
from models.mode import Mode
from models.point import PointSequence

HEADERS = ("Step", "X", "Y")


def table_rows(mode: Mode, points: PointSequence) -> List[Tuple[str, str, str]]:
    """One (step, x, y) row of display strings per point."""
    decimals = get_active_params()["BASIC_Y_DECIMALS"]
    rows = []
    for k, (x, y) in enumerate(points):
        if mode is Mode.BASIC:
            rows.append((str(k), f"{x:g}", f"{y:.{decimals}f}"))
        else:
            rows.append((str(k), str(int(x)), str(int(y))))
    return rows


def format_results_table(mode: Mode, points: PointSequence) -> str:
    """
    Plain-text table with a title line, e.g.

        DDA Results
        Step | X | Y
        -----+---+--
        0    | 0 | 0
    """
    rows = table_rows(mode, points)
    widths = [len(h) for h in HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def line(cells):
        return " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    out = [mode.label, line(HEADERS), "-+-".join("-" * w for w in widths)]
    if rows:
        out.extend(line(row) for row in rows)
    else:
        out.append("(no points)")
    return "\n".join(out)
