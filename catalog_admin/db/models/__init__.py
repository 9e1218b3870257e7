"""SQLAlchemy models for database tables."""

from .base import Base
from .product import Product
from .specs import Specs
from .pricing import PricingModel, PricingModelKey
from .body_color import BodyColor, BodyColorKey
from .gallery import GalleryImage
from .faq import FAQ, SalesFAQ
from .light_type import LightType
from .inventory import InventoryLine

# Table name -> model, used by the row-level store
TABLES = {
    model.__tablename__: model
    for model in (
        Product,
        Specs,
        PricingModel,
        BodyColor,
        GalleryImage,
        FAQ,
        SalesFAQ,
        LightType,
        InventoryLine
    )
}

__all__ = [
    'Base',
    'TABLES',
    'Product',
    'Specs',
    'PricingModel',
    'PricingModelKey',
    'BodyColor',
    'BodyColorKey',
    'GalleryImage',
    'FAQ',
    'SalesFAQ',
    'LightType',
    'InventoryLine'
]
