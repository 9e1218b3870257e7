"""Product gallery model definition."""

from sqlalchemy import Column, String, Integer, ForeignKey

from .base import Base

class GalleryImage(Base):
    """Gallery image of a product."""
    
    __tablename__ = 'product_gallery'
    
    id = Column(String, primary_key=True)
    product_id = Column(String, ForeignKey('products.id'), nullable=False, index=True)
    image_url = Column(String, nullable=False)
    sort_order = Column(Integer, nullable=False)
    
    def __repr__(self):
        """Return string representation."""
        return f'<GalleryImage(id="{self.id}", product="{self.product_id}", sort="{self.sort_order}")>'
