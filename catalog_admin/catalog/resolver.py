"""Light-type key resolution.

Operators pick light types by semantic key (natural, warm, ...). The catalog
identifies them by opaque ids in no guaranteed order, so a key is resolved by
matching its canonical tokens against catalog entry names.
"""

import enum
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

# Identifier used when no catalog entry matches a key
UNKNOWN_LIGHT_TYPE_ID = 'unknown_id'

class LightKey(str, enum.Enum):
    """Light type selectable for a product."""
    NATURAL = 'natural'
    WARM = 'warm'
    COOL = 'cool'
    RGB = 'rgb'
    TRI = 'tri'

# Lowercase tokens; an entry matches when its lowercased name contains any of them
LIGHT_TYPE_MATCHERS: Dict[LightKey, Tuple[str, ...]] = {
    LightKey.NATURAL: ('natural',),
    LightKey.WARM: ('warm',),
    LightKey.COOL: ('cool', 'white'),
    LightKey.RGB: ('rgb',),
    LightKey.TRI: ('tri', '3'),
}

# Inventory display labels
LIGHT_TYPE_LABELS: Dict[str, str] = {
    LightKey.NATURAL.value: 'نچرال',
    LightKey.WARM.value: 'آفتابی',
    LightKey.COOL.value: 'سفید',
    LightKey.RGB.value: 'RGB (مولتی کالر)',
    LightKey.TRI.value: '3 حالته (نچرال ، سفید ، آفتابی)',
}

@dataclass(frozen=True)
class LightTypeEntry:
    """Catalog record."""
    id: str
    name: str

@dataclass(frozen=True)
class LightTypeResolution:
    """Result of resolving a key against a catalog snapshot.

    ``matched`` is False when no entry matched; ``catalog_id`` then holds
    ``UNKNOWN_LIGHT_TYPE_ID``.
    """
    key: str
    catalog_id: str
    label: str
    matched: bool

def _key_value(key: Union[LightKey, str]) -> str:
    if isinstance(key, LightKey):
        return key.value
    return str(key)

def matches(key: Union[LightKey, str], name: str) -> bool:
    """Check whether a catalog entry name matches a light key."""
    try:
        tokens = LIGHT_TYPE_MATCHERS[LightKey(_key_value(key).lower())]
    except ValueError:
        return False
    lowered = name.lower()
    return any(token in lowered for token in tokens)

def resolve(key: Union[LightKey, str], catalog: Iterable[LightTypeEntry]) -> LightTypeResolution:
    """Resolve a light key to a catalog id and display label.

    The first catalog entry whose name matches wins. Keys without a match,
    including keys outside ``LightKey``, resolve to ``UNKNOWN_LIGHT_TYPE_ID``.

    Args:
        key: Light key
        catalog: Snapshot of catalog entries

    Returns:
        LightTypeResolution
    """
    value = _key_value(key)
    label = LIGHT_TYPE_LABELS.get(value, value)
    for entry in catalog:
        if matches(value, entry.name):
            return LightTypeResolution(value, entry.id, label, True)
    return LightTypeResolution(value, UNKNOWN_LIGHT_TYPE_ID, label, False)
