"""Postboard Utilities Module."""

from .formatting import TIMESTAMP_FORMAT, utc_timestamp

__all__ = ["TIMESTAMP_FORMAT", "utc_timestamp"]
