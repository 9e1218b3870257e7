"""Body color model definition."""

import enum
from sqlalchemy import Column, String, Integer, ForeignKey, Enum

from .base import Base

class BodyColorKey(enum.Enum):
    """Finish of a product body."""
    WHITE_GLOSSY = 'white_glossy'
    BLACK_MATTE = 'black_matte'

class BodyColor(Base):
    """A named finish variant of a product."""
    
    __tablename__ = 'body_colors'
    
    id = Column(String, primary_key=True)
    product_id = Column(String, ForeignKey('products.id'), nullable=False, index=True)
    name = Column(String, nullable=False)
    key = Column(Enum(BodyColorKey, values_callable=lambda keys: [k.value for k in keys]), nullable=False)
    initial_stock = Column(Integer, nullable=False, default=0)
    
    def __repr__(self):
        """Return string representation."""
        return f'<BodyColor(id="{self.id}", product="{self.product_id}", key="{self.key}")>'
