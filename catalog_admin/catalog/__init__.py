"""Light-type catalog access and key resolution."""

from .resolver import (
    LightKey,
    LightTypeEntry,
    LightTypeResolution,
    LIGHT_TYPE_LABELS,
    LIGHT_TYPE_MATCHERS,
    UNKNOWN_LIGHT_TYPE_ID,
    resolve
)
from .light_types import LightTypeCatalog

__all__ = [
    'LightKey',
    'LightTypeEntry',
    'LightTypeResolution',
    'LIGHT_TYPE_LABELS',
    'LIGHT_TYPE_MATCHERS',
    'UNKNOWN_LIGHT_TYPE_ID',
    'resolve',
    'LightTypeCatalog'
]
