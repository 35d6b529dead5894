# shiftclock/store/export.py
# Delimited (CSV) export of shift history

from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.constants import EXPORT_HEADER
from ..core.formatting import format_fixed2
from ..core.types import ShiftRecord


# * One export row per record: timestamp, seconds, HH:MM:SS, amount, wage
def export_row(record: ShiftRecord) -> list[str]:
    return [
        record.timestamp,
        str(record.duration_seconds),
        record.formatted_time,
        format_fixed2(record.amount),
        format_fixed2(record.wage_at_end),
    ]


# * Render header + rows w/ every field quoted & embedded quotes doubled
def to_delimited(records: Iterable[ShiftRecord]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for record in records:
        writer.writerow(export_row(record))
    return buf.getvalue()
