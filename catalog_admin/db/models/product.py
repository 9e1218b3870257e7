"""Product model definition."""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, Boolean
from .base import Base

class Product(Base):
    """Product model.

    Owns the specs, pricing, body color, gallery, FAQ and inventory rows
    that reference it by ``product_id``.
    """
    
    __tablename__ = 'products'
    
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    code_liner = Column(String, unique=True, nullable=False)
    category = Column(String, nullable=False)
    short_description = Column(String, default='')
    no_pricing = Column(String, default='')
    is_active = Column(Boolean, nullable=False, default=True)
    custom_design = Column('Custom_design', Boolean, nullable=False, default=False)
    active_body_color = Column(Boolean, nullable=False, default=True)
    active_light_type = Column(Boolean, nullable=False, default=True)
    image_url = Column(String, default='')
    image_black_url = Column(String, default='')
    image_white_url = Column(String, default='')
    pdf_url = Column('Pdf_url', String, default='')
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    deleted_at = Column(DateTime)
    
    def __repr__(self):
        """Return string representation."""
        return f'<Product(id="{self.id}", code="{self.code_liner}", name="{self.name}")>'
