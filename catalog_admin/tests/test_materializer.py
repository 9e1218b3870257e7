"""Tests for cross-product materialization."""

import itertools
import logging

import pytest

from ..catalog import LightKey, LightTypeEntry, UNKNOWN_LIGHT_TYPE_ID
from ..processors.error_tracker import ErrorTracker
from ..processors.materializer import materialize, IN_STOCK_STATUS

CATALOG = [
    LightTypeEntry('lt-natural', 'Natural'),
    LightTypeEntry('lt-warm', 'Warm'),
    LightTypeEntry('lt-cool', 'Cool White'),
    LightTypeEntry('lt-rgb', 'RGB'),
    LightTypeEntry('lt-tri', 'Tri-mode'),
]

def _pricing(n):
    return [{'id': f'p{i}', 'model_name': f'Model {i}'} for i in range(n)]

def _colors(n):
    return [{'id': f'c{i}', 'name': f'Color {i}'} for i in range(n)]

def test_example_configuration_yields_eight_lines():
    pricing = [{'id': 'eco', 'model_name': 'Economy'}, {'id': 'pre', 'model_name': 'Premium'}]
    colors = [{'id': 'white', 'name': 'White'}, {'id': 'black', 'name': 'Black'}]
    lines = materialize('prod', pricing, colors, ['natural', 'warm'], CATALOG)
    assert len(lines) == 8

@pytest.mark.parametrize('n_pricing, n_colors, n_lights', [
    (1, 1, 1),
    (3, 1, 2),
    (1, 2, 5),
    (4, 3, 5),
])
def test_cardinality_is_product_of_axes(n_pricing, n_colors, n_lights):
    keys = list(LightKey)[:n_lights]
    lines = materialize('prod', _pricing(n_pricing), _colors(n_colors), keys, CATALOG)
    assert len(lines) == n_pricing * n_colors * n_lights

def test_lines_are_unique():
    lines = materialize('prod', _pricing(3), _colors(2), list(LightKey), CATALOG)
    identities = [line.identity for line in lines]
    assert len(identities) == len(set(identities))

def test_lines_cover_full_cross_product():
    pricing, colors = _pricing(2), _colors(2)
    lines = materialize('prod', pricing, colors, [LightKey.COOL, LightKey.RGB], CATALOG)
    expected = set(itertools.product(['p0', 'p1'], ['c0', 'c1'], ['lt-cool', 'lt-rgb']))
    assert {line.identity for line in lines} == expected

def test_materialization_is_deterministic():
    args = ('prod', _pricing(2), _colors(2), ['natural', 'tri'], CATALOG)
    first = {line.identity for line in materialize(*args)}
    second = {line.identity for line in materialize(*args)}
    assert first == second

def test_traversal_order_is_pricing_color_light():
    lines = materialize('prod', _pricing(2), _colors(2), ['natural', 'warm'], CATALOG)
    assert [line.identity for line in lines[:4]] == [
        ('p0', 'c0', 'lt-natural'),
        ('p0', 'c0', 'lt-warm'),
        ('p0', 'c1', 'lt-natural'),
        ('p0', 'c1', 'lt-warm'),
    ]
    assert lines[4].pricing_id == 'p1'

def test_new_lines_have_zero_stock_and_in_stock_markers():
    line = materialize('prod', _pricing(1), _colors(1), ['rgb'], CATALOG, code_liner='131 - 7')[0]
    assert line.stock_qty == 0
    assert line.status == IN_STOCK_STATUS
    assert line.status_pricing_model == IN_STOCK_STATUS
    assert line.status_body_color == IN_STOCK_STATUS
    assert line.status_light_type == IN_STOCK_STATUS
    assert line.code_liner == '131 - 7'
    assert line.model_name == 'Model 0'
    assert line.body_color == 'Color 0'
    assert line.light_type == 'RGB (مولتی کالر)'
    assert line.light_key == 'rgb'

def test_unresolved_light_key_degrades_to_sentinel(caplog):
    tracker = ErrorTracker()
    catalog = [LightTypeEntry('lt-natural', 'Natural')]
    with caplog.at_level(logging.WARNING):
        lines = materialize('prod', _pricing(1), _colors(2), ['natural', 'rgb'], catalog,
                            error_tracker=tracker)
    
    assert len(lines) == 4
    unresolved = [line for line in lines if line.light_key == 'rgb']
    assert all(line.light_type_id == UNKNOWN_LIGHT_TYPE_ID for line in unresolved)
    assert tracker.has_errors('LIGHT_TYPE_UNRESOLVED')
    assert "'rgb' has no catalog match" in caplog.text

def test_to_row_contains_inventory_columns():
    row = materialize('prod', _pricing(1), _colors(1), ['warm'], CATALOG)[0].to_row()
    assert row['product_id'] == 'prod'
    assert row['pricing_id'] == 'p0'
    assert row['body_color_id'] == 'c0'
    assert row['light_type_id'] == 'lt-warm'
    assert row['stock_qty'] == 0
