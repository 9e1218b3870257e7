"""Pricing model definition."""

import enum
from sqlalchemy import Column, String, Integer, Numeric, Boolean, ForeignKey, Enum

from .base import Base

class PricingModelKey(enum.Enum):
    """Distinguishing key of a pricing model."""
    CUSTOM = 'CUSTOM'
    BRIGHT = 'BRIGHT'
    ECO = 'ECO'
    SIMPLE = 'SIMPLE'

class PricingModel(Base):
    """A named price/warranty/technical variant of a product."""
    
    __tablename__ = 'pricing'
    
    id = Column(String, primary_key=True)
    product_id = Column(String, ForeignKey('products.id'), nullable=False, index=True)
    model_name = Column(String, nullable=False)
    model_key = Column(Enum(PricingModelKey), nullable=False)
    price_per_meter = Column(Numeric(12, 2), nullable=False, default=0)
    warranty_months = Column(Integer, nullable=False, default=0)
    light = Column(String, default='')
    light_source_fa = Column('light_source_persion', String, default='')
    light_source = Column(String, default='')
    density = Column(String, default='')
    three_color = Column('3Color', String, default='No')
    rgb = Column('RGB', String, default='No')
    ip65 = Column('IP65', Boolean, nullable=False, default=False)
    ip20 = Column('IP20', Boolean, nullable=False, default=False)
    tag = Column('tage', String, default='')
    space_recommend = Column('spase_recommend', String, default='')
    dimmer = Column('dimer', String, default='')
    pricing_code_liner = Column(String, nullable=False)
    suitable_for = Column(String, default='')
    longevity = Column(String, default='')
    lumen = Column(Integer, default=0)
    w_per_meter = Column(String, default='')
    power_source = Column(String, default='')
    row_in_liner = Column(String, default='')
    
    def __repr__(self):
        """Return string representation."""
        return f'<PricingModel(id="{self.id}", product="{self.product_id}", name="{self.model_name}")>'
