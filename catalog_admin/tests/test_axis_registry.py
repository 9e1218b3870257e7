"""Tests for axis validation."""

import pytest

from ..catalog import LightKey
from ..db.models import PricingModelKey, BodyColorKey
from ..errors import ValidationError
from ..processors.axis_registry import AxisRegistry
from ..processors.payload import PricingModelInput, BodyColorInput

PRICING = [PricingModelInput('Economy', PricingModelKey.ECO, '131 - 1')]
COLORS = [
    BodyColorInput('White', BodyColorKey.WHITE_GLOSSY),
    BodyColorInput('Black', BodyColorKey.BLACK_MATTE),
]

def test_valid_registry():
    registry = AxisRegistry(PRICING, COLORS, ['natural', 'rgb', 'tri']).validate()
    assert registry.expected_line_count == 6
    assert registry.resolved_light_keys == [LightKey.NATURAL, LightKey.RGB, LightKey.TRI]

@pytest.mark.parametrize('pricing, colors, lights, message', [
    ([], COLORS, ['natural'], 'pricing model'),
    (PRICING, [], ['natural'], 'body color'),
    (PRICING, COLORS, [], 'light type'),
])
def test_empty_axis_is_rejected(pricing, colors, lights, message):
    with pytest.raises(ValidationError) as exc_info:
        AxisRegistry(pricing, colors, lights).validate()
    assert len(exc_info.value.issues) == 1
    assert message in exc_info.value.issues[0]

def test_all_empty_axes_are_reported_together():
    issues = AxisRegistry([], [], []).collect_issues()
    assert len(issues) == 3

def test_unknown_light_key_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        AxisRegistry(PRICING, COLORS, ['natural', 'infrared']).validate()
    assert "'infrared'" in exc_info.value.issues[0]

def test_duplicate_light_key_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        AxisRegistry(PRICING, COLORS, ['warm', 'warm']).validate()
    assert 'more than once' in exc_info.value.issues[0]
