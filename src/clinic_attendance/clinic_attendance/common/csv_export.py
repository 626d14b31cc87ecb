from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence


def render_csv(rows: Iterable[Sequence[object]]) -> str:
    """Render rows (header included) as CSV text.

    Every cell is double-quoted and embedded quotes are doubled. Rows are
    joined with a bare newline and the text carries no trailing newline.
    """

    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if cell is None else cell for cell in row])
    text = out.getvalue()
    return text[:-1] if text.endswith("\n") else text
