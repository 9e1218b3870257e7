"""Utility functions and helpers."""

from .normalization import parse_form_bool, sanitize_file_name, blank_if_none
from .identifiers import generate_uuid, timestamped_name
from .liner_codes import standard_liner_codes, is_standard_liner_code

__all__ = [
    'parse_form_bool',
    'sanitize_file_name',
    'blank_if_none',
    'generate_uuid',
    'timestamped_name',
    'standard_liner_codes',
    'is_standard_liner_code'
]
