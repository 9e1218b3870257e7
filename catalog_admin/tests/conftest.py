"""Shared test fixtures and utilities."""

import copy
import pytest

from ..catalog import LightTypeCatalog
from ..db.models import LightType
from ..db.session import SessionManager
from ..db.store import RelationalStore
from ..processors.orchestrator import PersistenceOrchestrator
from ..processors.progress import ProgressLog

CATALOG_ROWS = [
    {'id': 'lt-natural', 'name': 'Natural'},
    {'id': 'lt-warm', 'name': 'Warm'},
    {'id': 'lt-cool', 'name': 'Cool White'},
    {'id': 'lt-rgb', 'name': 'RGB'},
    {'id': 'lt-tri', 'name': 'Tri-mode'},
]

BASE_FORM = {
    'name': 'Linear Slim',
    'code_liner': '131 - 7',
    'category': 'linear',
    'short_description': 'Recessed linear light',
    'is_active': 'true',
    'Custom_design': 'false',
    'active_body_color': 'true',
    'active_light_type': 'true',
    'specs': {
        'dimensions': '35x70',
        'body_material': 'aluminium',
        'code_liner': '131 - 7'
    },
    'pricing': [
        {
            'model_name': 'Economy',
            'model_key': 'ECO',
            'pricing_code_liner': '131 - 7',
            'price_per_meter': 1200000,
            'warranty_months': 12,
            'ip65': 'false',
            'ip20': 'true'
        },
        {
            'model_name': 'Premium',
            'model_key': 'BRIGHT',
            'pricing_code_liner': '131 - 7',
            'price_per_meter': 1850000,
            'warranty_months': 24,
            'ip65': 'true',
            'ip20': 'false'
        }
    ],
    'body_colors': [
        {'name': 'White', 'key': 'white_glossy', 'initial_stock': 10},
        {'name': 'Black', 'key': 'black_matte', 'initial_stock': 4}
    ],
    'faqs': [
        {'question': 'Is it dimmable?', 'answer': 'Yes', 'code_liner': '131 - 7'}
    ],
    'faq_sales': [
        {'question': 'Delivery time?', 'answer': 'Three days', 'code_liner': '131 - 7'}
    ],
    'light_type_values': ['natural', 'warm']
}

@pytest.fixture
def database_url(tmp_path):
    """File-backed SQLite database private to one test."""
    return f"sqlite:///{tmp_path / 'catalog.db'}"

@pytest.fixture
def session_manager(database_url):
    """Create a session manager with a fresh schema."""
    manager = SessionManager(database_url)
    manager.create_schema()
    yield manager
    manager.dispose()

@pytest.fixture
def store(session_manager):
    """Row-level store with the light-type catalog seeded."""
    store = RelationalStore(session_manager)
    store.insert(LightType.__tablename__, CATALOG_ROWS)
    return store

@pytest.fixture
def catalog(store):
    return LightTypeCatalog(store)

@pytest.fixture
def progress():
    return ProgressLog()

@pytest.fixture
def orchestrator(store, catalog, progress):
    return PersistenceOrchestrator(store, catalog, progress=progress)

@pytest.fixture
def make_form():
    """Return a factory producing independent copies of a valid form."""
    def _make(**overrides):
        form = copy.deepcopy(BASE_FORM)
        form.update(copy.deepcopy(overrides))
        return form
    return _make
