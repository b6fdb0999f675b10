"""
Postboard Formatting Utilities

Helper functions for formatting stored values.
"""

from datetime import datetime, timezone
from typing import Optional

# Matches SQLite's CURRENT_TIMESTAMP output
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a moment as the UTC timestamp stored in ``created_at``.

    Args:
        now: Moment to format (default: current time). Naive values are
            taken to be UTC already.

    Returns:
        Formatted string like "2025-12-10 14:32:07"
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)
