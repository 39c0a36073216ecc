from __future__ import annotations

from typing import List, Sequence

from errors import SourceReadError
from models import IdentityRecord


def rows_to_records(grid: Sequence[Sequence[str]]) -> List[IdentityRecord]:
    """Map a header row plus data rows to IdentityRecords; short rows pad with ""."""
    if not grid or not grid[0]:
        raise SourceReadError("No data found in identity source.")
    headers = [str(h) for h in grid[0]]
    records = []
    for row in grid[1:]:
        fields = {}
        for i, header in enumerate(headers):
            value = row[i] if i < len(row) else ""
            fields[header] = "" if value is None else str(value)
        records.append(IdentityRecord(fields=fields))
    return records


def select_record(records: Sequence[IdentityRecord], index: int) -> IdentityRecord:
    """Pick the fixed-position record the run processes."""
    if index < 0 or index >= len(records):
        raise SourceReadError(
            f"Identity source has {len(records)} data rows; record index {index} is out of range."
        )
    record = records[index]
    if not record.name:
        raise SourceReadError(f"Identity record {index} has no Name value.")
    return record
