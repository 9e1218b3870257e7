"""Tests for the row-level relational store."""

from datetime import datetime, timedelta

import pytest

from ..db.models import Product
from ..errors import PersistenceError, DuplicateLinerCodeError, ProductNotFoundError

def _product(code_liner='131 - 1', name='Spot'):
    return {'name': name, 'code_liner': code_liner, 'category': 'spot'}

def test_insert_assigns_ids(store):
    rows = store.insert('products', [_product('131 - 1'), _product('131 - 2')])
    assert len(rows) == 2
    assert all(row['id'] for row in rows)
    assert rows[0]['id'] != rows[1]['id']
    assert rows[0]['is_active'] is True
    assert rows[0]['deleted_at'] is None

def test_insert_keeps_given_id(store):
    row = store.insert('products', [dict(_product(), id='fixed-id')])[0]
    assert row['id'] == 'fixed-id'
    assert store.get('products', 'fixed-id')['code_liner'] == '131 - 1'

def test_insert_nothing(store):
    assert store.insert('products', []) == []

def test_update_changes_row(store):
    row = store.insert('products', [_product()])[0]
    updated = store.update('products', row['id'], {'name': 'Spot XL', 'is_active': False})
    assert updated['name'] == 'Spot XL'
    assert updated['is_active'] is False
    assert store.get('products', row['id'])['name'] == 'Spot XL'

def test_update_missing_row(store):
    with pytest.raises(ProductNotFoundError):
        store.update('products', 'missing', {'name': 'x'})

def test_get_missing_row(store):
    with pytest.raises(ProductNotFoundError) as exc_info:
        store.get('products', 'missing')
    assert exc_info.value.row_id == 'missing'

def test_duplicate_liner_code(store):
    store.insert('products', [_product('131 - 5')])
    with pytest.raises(DuplicateLinerCodeError) as exc_info:
        store.insert('products', [_product('131 - 5', name='Other')])
    assert exc_info.value.code_liner == '131 - 5'
    assert isinstance(exc_info.value, PersistenceError)
    assert len(store.select_all('products', {'code_liner': '131 - 5'})) == 1

def test_duplicate_liner_code_on_update(store):
    store.insert('products', [_product('131 - 5')])
    row = store.insert('products', [_product('131 - 6')])[0]
    with pytest.raises(DuplicateLinerCodeError):
        store.update('products', row['id'], {'code_liner': '131 - 5'})

def test_delete_requires_filter(store):
    with pytest.raises(PersistenceError):
        store.delete('products', {})

def test_delete_returns_count(store):
    store.insert('faqs', [
        {'product_id': 'p1', 'question': 'q1', 'answer': 'a', 'code_liner': 'c', 'sort': 1},
        {'product_id': 'p1', 'question': 'q2', 'answer': 'a', 'code_liner': 'c', 'sort': 2},
        {'product_id': 'p2', 'question': 'q3', 'answer': 'a', 'code_liner': 'c', 'sort': 1},
    ])
    assert store.delete('faqs', {'product_id': 'p1'}) == 2
    assert [row['question'] for row in store.select_all('faqs')] == ['q3']

def test_select_order_by(store):
    store.insert('faqs', [
        {'product_id': 'p1', 'question': 'second', 'answer': 'a', 'code_liner': 'c', 'sort': 2},
        {'product_id': 'p1', 'question': 'first', 'answer': 'a', 'code_liner': 'c', 'sort': 1},
    ])
    ascending = store.select_all('faqs', {'product_id': 'p1'}, 'sort')
    descending = store.select_all('faqs', {'product_id': 'p1'}, ['-sort'])
    assert [row['question'] for row in ascending] == ['first', 'second']
    assert [row['question'] for row in descending] == ['second', 'first']

def test_unknown_table(store):
    with pytest.raises(PersistenceError):
        store.select_all('nope')

def test_timestamps_default_to_utc(store):
    assert Product.__table__.c.created_at.server_default is None
    assert Product.__table__.c.created_at.default is not None

    row = store.insert('products', [_product()])[0]
    assert abs(row['created_at'] - datetime.utcnow()) < timedelta(minutes=1)

    updated = store.update('products', row['id'], {'name': 'Spot XL'})
    assert updated['updated_at'] >= row['created_at']
