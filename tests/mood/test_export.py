"""Tests for mood export."""

import csv
import json
from datetime import date, timedelta

import pytest

from mood.export import MoodExporter


@pytest.fixture
def exporter_setup(storage, tmp_path):
    today = date.today()
    storage.create("Happy", "picnic", entry_date=today, sentiment_score=0.9)
    storage.create("Sad", "flat tyre, cold rain", entry_date=today - timedelta(days=2))
    storage.create("Neutral", "quiet", entry_date=today - timedelta(days=40), sentiment_score=0.5)
    return {"exporter": MoodExporter(storage), "tmp": tmp_path}


class TestExportJSON:
    def test_export_all(self, exporter_setup):
        out = exporter_setup["tmp"] / "export.json"
        assert exporter_setup["exporter"].export_json(out) == 3

        data = json.loads(out.read_text())
        assert data["count"] == 3
        assert "exported_at" in data
        assert data["entries"][0]["description"] == "picnic"
        assert data["entries"][1]["sentiment_score"] is None

    def test_days_filter(self, exporter_setup):
        out = exporter_setup["tmp"] / "recent.json"
        assert exporter_setup["exporter"].export_json(out, days=7) == 2

    def test_creates_parent_dirs(self, exporter_setup):
        out = exporter_setup["tmp"] / "sub" / "dir" / "export.json"
        exporter_setup["exporter"].export_json(out)
        assert out.exists()

    def test_empty(self, storage, tmp_path):
        out = tmp_path / "empty.json"
        assert MoodExporter(storage).export_json(out) == 0
        assert json.loads(out.read_text())["entries"] == []


class TestExportCSV:
    def test_rows_and_header(self, exporter_setup):
        out = exporter_setup["tmp"] / "export.csv"
        assert exporter_setup["exporter"].export_csv(out) == 3

        with open(out, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [r["mood_type"] for r in rows] == ["Happy", "Sad", "Neutral"]
        assert rows[1]["description"] == "flat tyre, cold rain"
        assert rows[1]["sentiment_score"] == ""
