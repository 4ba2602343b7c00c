"""SQLite-backed mood entry CRUD."""

import sqlite3
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional

import structlog

from db import connection
from shared_types import MoodType

from .models import MoodEntry

logger = structlog.get_logger()

ALLOWED_MOOD_TYPES = tuple(MoodType)
MAX_DESCRIPTION_LENGTH = 10_000

_ORDER_NEWEST_FIRST = "ORDER BY date DESC, created_at DESC, id DESC"


class MoodStorage:
    """SQLite persistence for mood entries.

    Every call opens its own short-lived connection. sqlite failures surface
    as ``db.StorageError``.
    """

    def __init__(self, db_path: str | Path, scorer=None):
        """
        Args:
            db_path: SQLite file, created on first use
            scorer: Optional object with ``score(text) -> float`` used when an
                entry is saved or edited without an explicit sentiment score
        """
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.scorer = scorer
        self._init_db()

    def _init_db(self):
        with connection(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS mood_entries (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    date TEXT NOT NULL,
                    mood_type TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    sentiment_score REAL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_mood_entries_date ON mood_entries(date)")

    def _score(self, description: str) -> Optional[float]:
        if self.scorer is None:
            return None
        return self.scorer.score(description)

    @staticmethod
    def _validate(mood_type: str, description: str) -> None:
        if mood_type not in ALLOWED_MOOD_TYPES:
            raise ValueError(
                f"Invalid mood_type '{mood_type}'. Must be one of {[str(m) for m in ALLOWED_MOOD_TYPES]}"
            )
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise ValueError(f"Description exceeds max length ({MAX_DESCRIPTION_LENGTH} chars)")

    def create(
        self,
        mood_type: str,
        description: str,
        entry_date: Optional[date] = None,
        sentiment_score: Optional[float] = None,
    ) -> MoodEntry:
        """Save a new entry.

        Args:
            mood_type: Happy, Neutral or Sad
            description: Free text
            entry_date: Logical day (defaults to today)
            sentiment_score: Explicit score; computed with the scorer when None

        Returns:
            The stored entry with its assigned id

        Raises:
            ValueError: If mood_type is invalid or description too long
        """
        self._validate(mood_type, description)
        entry_date = entry_date or date.today()
        if sentiment_score is None:
            sentiment_score = self._score(description)
        created_at = datetime.now().isoformat()

        with connection(self.db_path) as conn:
            cursor = conn.execute(
                "INSERT INTO mood_entries (date, mood_type, description, sentiment_score, created_at) "
                "VALUES (?, ?, ?, ?, ?)",
                (entry_date.isoformat(), str(mood_type), description, sentiment_score, created_at),
            )
            entry_id = cursor.lastrowid

        logger.info("mood.saved", entry_id=entry_id, mood_type=str(mood_type), date=entry_date.isoformat())
        return MoodEntry(
            id=entry_id,
            date=entry_date,
            mood_type=str(mood_type),
            description=description,
            sentiment_score=sentiment_score,
            created_at=created_at,
        )

    def list_all(self) -> list[MoodEntry]:
        """All entries, newest date first, then newest insertion first."""
        with connection(self.db_path) as conn:
            rows = conn.execute(f"SELECT * FROM mood_entries {_ORDER_NEWEST_FIRST}").fetchall()
        return [self._row_to_entry(r) for r in rows]

    def list_by_date_range(self, start: date, end: date) -> list[MoodEntry]:
        """Entries with ``start <= date <= end``, newest first."""
        with connection(self.db_path) as conn:
            rows = conn.execute(
                f"SELECT * FROM mood_entries WHERE date BETWEEN ? AND ? {_ORDER_NEWEST_FIRST}",
                (start.isoformat(), end.isoformat()),
            ).fetchall()
        entries = [self._row_to_entry(r) for r in rows]
        logger.debug(
            "mood.range_query",
            start=start.isoformat(),
            end=end.isoformat(),
            count=len(entries),
        )
        return entries

    def list_last_days(self, days: int) -> list[MoodEntry]:
        """Entries from the last ``days`` calendar days, today included."""
        end = date.today()
        start = end - timedelta(days=days - 1)
        return self.list_by_date_range(start, end)

    def list_recent(self, limit: int = 20) -> list[MoodEntry]:
        with connection(self.db_path) as conn:
            rows = conn.execute(
                f"SELECT * FROM mood_entries {_ORDER_NEWEST_FIRST} LIMIT ?", (limit,)
            ).fetchall()
        return [self._row_to_entry(r) for r in rows]

    def get(self, entry_id: int) -> Optional[MoodEntry]:
        with connection(self.db_path) as conn:
            row = conn.execute("SELECT * FROM mood_entries WHERE id = ?", (entry_id,)).fetchone()
        return self._row_to_entry(row) if row else None

    def update(
        self,
        entry_id: int,
        mood_type: Optional[str] = None,
        description: Optional[str] = None,
        sentiment_score: Optional[float] = None,
    ) -> Optional[MoodEntry]:
        """Update mood and/or description of an existing entry.

        The sentiment score is recomputed when the description changes and no
        explicit score is given.

        Returns:
            Updated entry, or None if no entry has this id
        """
        current = self.get(entry_id)
        if current is None:
            return None

        new_mood = mood_type if mood_type is not None else current.mood_type
        new_description = description if description is not None else current.description
        self._validate(new_mood, new_description)

        if sentiment_score is None:
            if description is not None and description != current.description:
                sentiment_score = self._score(new_description)
            else:
                sentiment_score = current.sentiment_score

        with connection(self.db_path) as conn:
            conn.execute(
                "UPDATE mood_entries SET mood_type = ?, description = ?, sentiment_score = ? WHERE id = ?",
                (str(new_mood), new_description, sentiment_score, entry_id),
            )

        logger.info("mood.updated", entry_id=entry_id)
        return self.get(entry_id)

    def delete(self, entry_id: int) -> bool:
        """Delete an entry. Returns False if it did not exist."""
        with connection(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM mood_entries WHERE id = ?", (entry_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("mood.deleted", entry_id=entry_id)
        return deleted

    def count(self) -> int:
        with connection(self.db_path) as conn:
            return conn.execute("SELECT COUNT(*) FROM mood_entries").fetchone()[0]

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> MoodEntry:
        d = dict(row)
        raw_date = d.get("date")
        try:
            entry_date = date.fromisoformat(raw_date)
        except (TypeError, ValueError):
            logger.warning("mood.bad_date", entry_id=d["id"], raw_date=raw_date)
            entry_date = None
        score = d.get("sentiment_score")
        if score is not None and not isinstance(score, (int, float)):
            logger.warning("mood.bad_sentiment", entry_id=d["id"], raw_score=score)
            score = None
        return MoodEntry(
            id=d["id"],
            date=entry_date,
            mood_type=d["mood_type"],
            description=d.get("description") or "",
            sentiment_score=score,
            created_at=d.get("created_at"),
        )
