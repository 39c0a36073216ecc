"""
Google Sheets identity source (Sheets API v4 values endpoint, API-key auth).
"""
from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional
from urllib.parse import quote

import requests

from config.settings import Settings
from errors import SourceReadError
from sources.registry import register


class GoogleSheetsSource:
    """Reads the identity grid from a Google Sheet shared for API-key access."""

    source_name = "google_sheets"
    required_settings = ("sheet_id", "api_key")

    def __init__(self, settings: Settings):
        self.settings = settings
        self.api_calls_made = 0

    def values_url(self) -> str:
        s = self.settings
        return f"{s.sheets_api_url}/{quote(s.sheet_id or '', safe='')}/values/{quote(s.sheet_range, safe='')}"

    def fetch_values(self) -> Optional[Dict]:
        """Execute the values request with retries; None when every attempt failed."""
        s = self.settings
        for attempt in range(s.max_retries):
            try:
                logging.info(f"Reading Google Sheet, attempt {attempt + 1}")
                response = requests.get(
                    self.values_url(),
                    params={"key": s.api_key},
                    timeout=s.request_timeout_seconds,
                )
                self.api_calls_made += 1

                if response.status_code == 200:
                    return response.json()
                elif response.status_code in (400, 403, 404):
                    # Bad key, sheet not shared or wrong range: retrying will not help
                    raise SourceReadError(
                        f"Error reading Google Sheet: HTTP {response.status_code}: {response.text[:200]}"
                    )
                else:
                    logging.error(f"Sheets request failed with status {response.status_code}: {response.text[:200]}")

            except requests.exceptions.RequestException as e:
                logging.error(f"Request error on attempt {attempt + 1}: {e}")
            if attempt < s.max_retries - 1:
                time.sleep(2 ** attempt)  # Exponential backoff

        return None

    def read_grid(self) -> List[List[str]]:
        data = self.fetch_values()
        if data is None:
            raise SourceReadError("Error reading Google Sheet: no response after retries.")
        rows = data.get("values") or []
        if not rows:
            raise SourceReadError("No data found in Google Sheet.")
        logging.info(f"Loaded {len(rows)} rows from Google Sheet.")
        return rows


def _register():
    register(GoogleSheetsSource.source_name, GoogleSheetsSource)


_register()
