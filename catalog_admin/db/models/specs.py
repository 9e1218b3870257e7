"""Specs model definition."""

from sqlalchemy import Column, String, ForeignKey

from .base import Base

class Specs(Base):
    """Technical specification sheet, one per product."""
    
    __tablename__ = 'specs'
    
    id = Column(String, primary_key=True)
    product_id = Column(String, ForeignKey('products.id'), nullable=False, index=True)
    dimensions = Column(String, default='')
    inset_cut_dimensions = Column(String, default='')
    row_in_liner = Column(String, default='')
    body_material = Column(String, default='')
    main_usage = Column(String, default='')
    installation_type = Column(String, default='')
    installation_method = Column(String, default='')
    notes = Column(String, default='')
    ceiling_height = Column('ertafa_saqf', String, default='')
    code_liner = Column(String, nullable=False)
    
    def __repr__(self):
        """Return string representation."""
        return f'<Specs(id="{self.id}", product="{self.product_id}")>'
