"""Tests for form parsing and field validation."""

import re
from pathlib import Path

import pytest

from ..db.models import PricingModelKey, BodyColorKey
from ..errors import ValidationError
from ..processors.payload import ProductPayload, MediaBundle
from ..utils import (
    parse_form_bool,
    sanitize_file_name,
    timestamped_name,
    standard_liner_codes,
    is_standard_liner_code
)

def test_form_flags_become_booleans(make_form):
    payload = ProductPayload.from_form(make_form(is_active='FALSE', Custom_design='True'))
    assert payload.is_active is False
    assert payload.custom_design is True
    assert payload.active_body_color is True
    assert payload.pricing[0].ip20 is True
    assert payload.pricing[0].ip65 is False

def test_real_booleans_are_accepted(make_form):
    payload = ProductPayload.from_form(make_form(is_active=False))
    assert payload.is_active is False

def test_invalid_flag_is_rejected(make_form):
    with pytest.raises(ValidationError) as exc_info:
        ProductPayload.from_form(make_form(is_active='yes'))
    assert 'is_active' in exc_info.value.issues[0]

def test_enums_are_parsed(make_form):
    payload = ProductPayload.from_form(make_form())
    assert payload.pricing[1].model_key is PricingModelKey.BRIGHT
    assert payload.body_colors[1].key is BodyColorKey.BLACK_MATTE

def test_unknown_enum_value_is_rejected(make_form):
    form = make_form()
    form['body_colors'][0]['key'] = 'chrome'
    with pytest.raises(ValidationError) as exc_info:
        ProductPayload.from_form(form)
    assert 'white_glossy' in exc_info.value.issues[0]

def test_non_numeric_price_is_rejected(make_form):
    form = make_form()
    form['pricing'][0]['price_per_meter'] = 'cheap'
    with pytest.raises(ValidationError):
        ProductPayload.from_form(form)

def test_original_column_aliases_are_read(make_form):
    form = make_form(Pdf_url='https://cdn.example/spec.pdf')
    form['specs']['ertafa_saqf'] = '3m'
    form['pricing'][0]['light_source_persion'] = 'ال ای دی'
    form['pricing'][0]['dimer'] = 'DALI'
    payload = ProductPayload.from_form(form)
    assert payload.pdf_url == 'https://cdn.example/spec.pdf'
    assert payload.specs.ceiling_height == '3m'
    assert payload.pricing[0].light_source_fa == 'ال ای دی'
    assert payload.pricing[0].dimmer == 'DALI'

def test_specs_inherit_product_liner_code(make_form):
    form = make_form()
    del form['specs']['code_liner']
    assert ProductPayload.from_form(form).specs.code_liner == '131 - 7'

def test_valid_form_has_no_issues(make_form):
    assert ProductPayload.from_form(make_form()).validate_fields() == []

def test_field_issues_are_collected(make_form):
    form = make_form(name='ab', category='')
    form['pricing'][0]['model_name'] = ''
    form['body_colors'][0]['initial_stock'] = -1
    form['faqs'][0]['answer'] = ''
    issues = ProductPayload.from_form(form).validate_fields()
    assert len(issues) == 5
    assert any('at least 3 characters' in issue for issue in issues)

def test_product_row_has_boolean_flags(make_form):
    row = ProductPayload.from_form(make_form()).product_row()
    assert row['is_active'] is True
    assert row['custom_design'] is False
    assert row['code_liner'] == '131 - 7'

def test_media_bundle_resolves_relative_paths(tmp_path):
    media = MediaBundle.from_form({'main': 'main.png', 'gallery': ['a.jpg', '', '/abs/b.jpg']}, tmp_path)
    assert media.main == tmp_path / 'main.png'
    assert media.gallery == [tmp_path / 'a.jpg', Path('/abs/b.jpg')]
    assert not media.is_empty()
    assert MediaBundle.from_form(None).is_empty()

@pytest.mark.parametrize('value, expected', [
    ('true', True),
    ('false', False),
    ('TRUE', True),
    (' False ', False),
    (True, True),
])
def test_parse_form_bool(value, expected):
    assert parse_form_bool(value) is expected

@pytest.mark.parametrize('value', ['yes', '1', '', None, 1])
def test_parse_form_bool_rejects_other_values(value):
    with pytest.raises(ValueError):
        parse_form_bool(value, 'flag')

def test_sanitize_file_name():
    assert sanitize_file_name('main image (1).png') == 'main_image__1_.png'
    assert sanitize_file_name('نور.pdf') == '___.pdf'
    assert sanitize_file_name('spec-v2.pdf') == 'spec-v2.pdf'

def test_standard_liner_codes():
    codes = standard_liner_codes()
    assert len(codes) == 180
    assert codes[0] == '131 - 1'
    assert codes[-1] == '132 - 90'
    assert is_standard_liner_code(' 131 - 7 ')
    assert not is_standard_liner_code('133 - 1')

def test_timestamped_name():
    assert re.fullmatch(r"\d{13}_spec_sheet.pdf", timestamped_name('spec sheet.pdf'))
