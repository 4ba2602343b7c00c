"""Mood journal export functionality."""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from .models import MoodEntry
from .storage import MoodStorage

CSV_FIELDS = ["id", "date", "mood_type", "description", "sentiment_score", "created_at"]


class MoodExporter:
    """Export mood entries to JSON or CSV."""

    def __init__(self, storage: MoodStorage):
        self.storage = storage

    def export_json(self, output_path: Path, days: Optional[int] = None) -> int:
        """Export entries to JSON.

        Args:
            output_path: Output file path
            days: Only include entries from last N days

        Returns:
            Number of entries exported
        """
        entries = self._get_entries(days)

        export_data = {
            "exported_at": datetime.now().isoformat(),
            "count": len(entries),
            "entries": [e.to_dict() for e in entries],
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w") as f:
            json.dump(export_data, f, indent=2, default=str)

        return len(entries)

    def export_csv(self, output_path: Path, days: Optional[int] = None) -> int:
        """Export entries to CSV, one row per entry. Returns the row count."""
        entries = self._get_entries(days)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
            writer.writeheader()
            for entry in entries:
                writer.writerow(entry.to_dict())

        return len(entries)

    def _get_entries(self, days: Optional[int] = None) -> list[MoodEntry]:
        if days:
            return self.storage.list_last_days(days)
        return self.storage.list_all()
