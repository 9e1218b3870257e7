"""Tests for light-type key resolution."""

import pytest

from ..catalog import (
    LightKey,
    LightTypeEntry,
    LIGHT_TYPE_LABELS,
    UNKNOWN_LIGHT_TYPE_ID,
    resolve
)
from ..catalog.resolver import matches

CATALOG = [
    LightTypeEntry('lt-natural', 'Natural'),
    LightTypeEntry('lt-warm', 'Warm'),
    LightTypeEntry('lt-cool', 'Cool White'),
    LightTypeEntry('lt-rgb', 'RGB'),
    LightTypeEntry('lt-tri', 'Tri-mode'),
]

@pytest.mark.parametrize('key, expected_id', [
    (LightKey.NATURAL, 'lt-natural'),
    (LightKey.WARM, 'lt-warm'),
    (LightKey.COOL, 'lt-cool'),
    (LightKey.RGB, 'lt-rgb'),
    (LightKey.TRI, 'lt-tri'),
])
def test_each_key_resolves(key, expected_id):
    """Every light key finds its catalog entry."""
    resolution = resolve(key, CATALOG)
    assert resolution.matched
    assert resolution.catalog_id == expected_id
    assert resolution.label == LIGHT_TYPE_LABELS[key.value]

def test_plain_string_keys_are_accepted():
    assert resolve('warm', CATALOG).catalog_id == 'lt-warm'
    assert resolve('WARM', CATALOG).catalog_id == 'lt-warm'

def test_matching_is_case_insensitive():
    catalog = [LightTypeEntry('a', 'NATURAL LIGHT 4000K')]
    assert resolve(LightKey.NATURAL, catalog).catalog_id == 'a'

def test_cool_matches_white():
    catalog = [LightTypeEntry('w', 'Pure white')]
    assert resolve(LightKey.COOL, catalog).catalog_id == 'w'

def test_tri_matches_digit_three():
    catalog = [LightTypeEntry('t', '3 mode')]
    assert resolve(LightKey.TRI, catalog).catalog_id == 't'

def test_first_match_wins():
    """Catalog order decides between several matching entries."""
    catalog = [
        LightTypeEntry('first', 'Warm 2700K'),
        LightTypeEntry('second', 'Warm white'),
    ]
    assert resolve(LightKey.WARM, catalog).catalog_id == 'first'

def test_no_match_returns_sentinel():
    resolution = resolve(LightKey.RGB, [LightTypeEntry('n', 'Natural')])
    assert not resolution.matched
    assert resolution.catalog_id == UNKNOWN_LIGHT_TYPE_ID
    assert resolution.label == LIGHT_TYPE_LABELS['rgb']

def test_empty_catalog_returns_sentinel():
    assert resolve(LightKey.NATURAL, []).catalog_id == UNKNOWN_LIGHT_TYPE_ID

def test_unknown_key_uses_raw_label():
    """Keys outside the known set never match and keep their raw text as label."""
    resolution = resolve('ultraviolet', CATALOG)
    assert not resolution.matched
    assert resolution.catalog_id == UNKNOWN_LIGHT_TYPE_ID
    assert resolution.label == 'ultraviolet'

def test_matches_predicate():
    assert matches(LightKey.COOL, 'Cool daylight')
    assert not matches(LightKey.COOL, 'Warm')
    assert not matches('ultraviolet', 'Ultraviolet')
