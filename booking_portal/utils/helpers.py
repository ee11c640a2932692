"""Helper utility functions"""
import re
from datetime import datetime

# Same shape the frontend sends: Date.prototype.toISOString(), always UTC
ISO_DATETIME_RE = re.compile(
    r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?Z$'
)

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

def parse_iso_datetime(value):
    """
    Parse a UTC ISO 8601 datetime string (e.g. ``2025-01-01T00:00:00.000Z``).
    Naive values and numeric offsets are rejected. Raises ValueError.
    """
    if not isinstance(value, str) or not ISO_DATETIME_RE.match(value):
        raise ValueError(f'not a UTC ISO datetime: {value!r}')
    return datetime.fromisoformat(value[:-1] + '+00:00')

def is_valid_email(value):
    return isinstance(value, str) and bool(EMAIL_RE.match(value))
