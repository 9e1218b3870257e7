"""Form-input normalization utilities.

The admin wizard submits flags as ``"true"``/``"false"`` strings and leaves
optional text fields empty or null. These helpers convert such values into
the types the data layer stores.
"""

import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

_UNSAFE_FILE_CHARS = re.compile(r'[^a-zA-Z0-9.-]')

def parse_form_bool(value: Any, field_name: str = 'value') -> bool:
    """Convert a form flag into a boolean.

    Args:
        value: ``"true"``/``"false"`` string (any case) or an actual bool
        field_name: Name of the field, used in the error message

    Returns:
        Parsed boolean

    Raises:
        ValueError: If the value is not a recognised flag

    Examples:
        >>> parse_form_bool("true")
        True
        >>> parse_form_bool("False")
        False
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == 'true':
            return True
        if lowered == 'false':
            return False
    raise ValueError(f"{field_name} must be 'true' or 'false', got {value!r}")

def blank_if_none(value: Optional[Any]) -> str:
    """Return an empty string for missing optional text fields."""
    if value is None:
        return ''
    return str(value)

def sanitize_file_name(name: str) -> str:
    """Replace characters that are unsafe in storage keys with underscores.

    Examples:
        >>> sanitize_file_name("main image (1).png")
        'main_image__1_.png'
    """
    sanitized = _UNSAFE_FILE_CHARS.sub('_', name)
    if sanitized != name:
        logger.debug(f"Sanitized file name {name!r} -> {sanitized!r}")
    return sanitized
