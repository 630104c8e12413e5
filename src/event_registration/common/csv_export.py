from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence


def to_csv_bytes(header: Sequence[str], rows: Iterable[Sequence[object]]) -> bytes:
    """Render rows as CSV with a UTF-8 BOM so spreadsheet apps pick the encoding."""
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(header)
    for row in rows:
        writer.writerow(["" if v is None else v for v in row])
    return out.getvalue().encode("utf-8-sig")


def yes_no(value: bool) -> str:
    return "Sim" if value else "Não"
