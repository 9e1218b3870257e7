"""Inventory line model definition."""

from sqlalchemy import Column, String, Integer, ForeignKey, UniqueConstraint

from .base import Base

class InventoryLine(Base):
    """One pricing x body color x light type combination of a product.

    ``light_type_id`` is either a catalog id or the unresolved sentinel, so
    it is not a foreign key.
    """
    
    __tablename__ = 'product_inventory'
    __table_args__ = (
        UniqueConstraint('product_id', 'pricing_id', 'body_color_id', 'light_key',
                         name='product_inventory_combination_key'),
    )
    
    id = Column(String, primary_key=True)
    product_id = Column(String, ForeignKey('products.id'), nullable=False, index=True)
    pricing_id = Column(String, ForeignKey('pricing.id'), nullable=False)
    body_color_id = Column(String, ForeignKey('body_colors.id'), nullable=False)
    light_type_id = Column(String, nullable=False)
    light_key = Column(String, nullable=False)
    stock_qty = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False)
    status_pricing_model = Column(String, nullable=False)
    status_body_color = Column(String, nullable=False)
    status_light_type = Column(String, nullable=False)
    code_liner = Column(String, default='')
    model_name = Column(String, default='')
    body_color = Column('body_Color', String, default='')
    light_type = Column(String, default='')
    
    def __repr__(self):
        """Return string representation."""
        return (f'<InventoryLine(product="{self.product_id}", pricing="{self.pricing_id}", '
                f'color="{self.body_color_id}", light="{self.light_type_id}")>')
