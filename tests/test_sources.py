from __future__ import annotations

import pytest
import requests

from errors import SourceReadError
from sources.base import rows_to_records, select_record
from sources.csv_file import CsvFileSource
from sources.google_sheets import GoogleSheetsSource


class _Resp:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        return self._payload


GRID = [
    ["Name", "Email", "Suburb"],
    ["Alice Example", "alice@example.com"],
    ["Bob Example", "", "Parramatta"],
    ["Jane Smith", "jane@example.com", "Manly"],
]


def test_rows_to_records_pads_missing_cells():
    records = rows_to_records(GRID)
    assert len(records) == 3
    assert records[0].fields == {"Name": "Alice Example", "Email": "alice@example.com", "Suburb": ""}
    assert records[2].name == "Jane Smith"


def test_rows_to_records_rejects_empty_grid():
    with pytest.raises(SourceReadError):
        rows_to_records([])
    with pytest.raises(SourceReadError):
        rows_to_records([[]])


def test_select_record_by_fixed_position():
    records = rows_to_records(GRID)
    assert select_record(records, 2).name == "Jane Smith"
    with pytest.raises(SourceReadError):
        select_record(records, 3)


def test_select_record_requires_a_name():
    records = rows_to_records([["name", "Email"], ["", "x@y.com"]])
    with pytest.raises(SourceReadError):
        select_record(records, 0)
    # lower-case header is accepted as the name column
    assert rows_to_records([["name"], ["Kim Lee"]])[0].name == "Kim Lee"


def test_google_sheets_reads_values(monkeypatch, settings):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen["url"] = url
        seen["params"] = params
        return _Resp(200, {"range": "Sheet1!A1:C4", "values": GRID})

    monkeypatch.setattr(requests, "get", fake_get)
    src = GoogleSheetsSource(settings)
    assert src.read_grid() == GRID
    assert seen["url"].endswith("/sheet-123/values/Sheet1")
    assert seen["params"] == {"key": "key-abc"}
    assert src.api_calls_made == 1


def test_google_sheets_empty_sheet(monkeypatch, settings):
    monkeypatch.setattr(requests, "get", lambda *a, **k: _Resp(200, {"range": "Sheet1"}))
    with pytest.raises(SourceReadError, match="No data found"):
        GoogleSheetsSource(settings).read_grid()


def test_google_sheets_forbidden_is_not_retried(monkeypatch, settings):
    calls = []

    def fake_get(*a, **k):
        calls.append(1)
        return _Resp(403, text="The caller does not have permission")

    monkeypatch.setattr(requests, "get", fake_get)
    with pytest.raises(SourceReadError, match="403"):
        GoogleSheetsSource(settings).read_grid()
    assert len(calls) == 1


def test_google_sheets_retries_then_fails(monkeypatch, settings):
    calls = []

    def fake_get(*a, **k):
        calls.append(1)
        raise requests.exceptions.ConnectionError("offline")

    monkeypatch.setattr(requests, "get", fake_get)
    monkeypatch.setattr("sources.google_sheets.time.sleep", lambda s: None)
    with pytest.raises(SourceReadError):
        GoogleSheetsSource(settings).read_grid()
    assert len(calls) == settings.max_retries


def test_csv_file_source(tmp_path, monkeypatch):
    path = tmp_path / "people.csv"
    path.write_text("Name,Email\nAlice Example,a@example.com\nBob,\n", encoding="utf-8")
    monkeypatch.setenv("SHEET_ID", str(path))
    from config.settings import load_settings
    rows = CsvFileSource(load_settings()).read_grid()
    assert rows == [["Name", "Email"], ["Alice Example", "a@example.com"], ["Bob", ""]]


def test_csv_file_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("SHEET_ID", str(tmp_path / "missing.csv"))
    from config.settings import load_settings
    with pytest.raises(SourceReadError):
        CsvFileSource(load_settings()).read_grid()
