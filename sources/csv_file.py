from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List

from config.settings import Settings
from errors import SourceReadError
from sources.registry import register


class CsvFileSource:
    """Local CSV export of the identity sheet; SHEET_ID holds the file path."""

    source_name = "csv_file"
    required_settings = ("sheet_id",)

    def __init__(self, settings: Settings):
        self.settings = settings

    def read_grid(self) -> List[List[str]]:
        path = Path(self.settings.sheet_id or "")
        try:
            with path.open("r", encoding="utf-8-sig", newline="") as f:
                rows = [row for row in csv.reader(f)]
        except OSError as e:
            raise SourceReadError(f"Error reading {path}: {e}") from e
        if not rows:
            raise SourceReadError(f"No data found in {path}.")
        logging.info(f"Loaded {len(rows)} rows from {path}.")
        return rows


def _register():
    register(CsvFileSource.source_name, CsvFileSource)


_register()
