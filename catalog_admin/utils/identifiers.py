"""Identifier generation for rows and stored objects."""

import time
import uuid

from .normalization import sanitize_file_name

def generate_uuid() -> str:
    """Return a new row id (UUID4 string)."""
    return str(uuid.uuid4())

def timestamped_name(file_name: str) -> str:
    """Prefix a sanitized file name with the current time in milliseconds."""
    millis = int(time.time() * 1000)
    return f"{millis}_{sanitize_file_name(file_name)}"
