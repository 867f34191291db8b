"""Row conversion helpers shared by the SQLite stores."""

from datetime import datetime


def parse_timestamp(value: str | None) -> datetime:
    """Parse a stored ISO timestamp, falling back to now for missing or bad values."""
    if value:
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            pass
    return datetime.utcnow()
