"""Processors for product configuration and catalog data."""

from .axis_registry import AxisRegistry
from .materializer import materialize, InventoryLine, IN_STOCK_STATUS
from .orchestrator import PersistenceOrchestrator, OperationResult
from .payload import (
    ProductPayload,
    SpecsInput,
    PricingModelInput,
    BodyColorInput,
    FAQInput,
    MediaBundle
)
from .progress import ProgressLog, ProgressEntry, StepStatus
from .error_tracker import ErrorTracker
from .light_type_import import LightTypeImportProcessor

__all__ = [
    'AxisRegistry',
    'materialize',
    'InventoryLine',
    'IN_STOCK_STATUS',
    'PersistenceOrchestrator',
    'OperationResult',
    'ProductPayload',
    'SpecsInput',
    'PricingModelInput',
    'BodyColorInput',
    'FAQInput',
    'MediaBundle',
    'ProgressLog',
    'ProgressEntry',
    'StepStatus',
    'ErrorTracker',
    'LightTypeImportProcessor'
]
