"""FAQ model definitions."""

from sqlalchemy import Column, String, Integer, ForeignKey

from .base import Base

class FAQ(Base):
    """Product question and answer."""
    
    __tablename__ = 'faqs'
    
    id = Column(String, primary_key=True)
    product_id = Column(String, ForeignKey('products.id'), nullable=False, index=True)
    question = Column(String, nullable=False)
    answer = Column(String, nullable=False)
    code_liner = Column(String, nullable=False)
    sort = Column(Integer, nullable=False)
    
    def __repr__(self):
        """Return string representation."""
        return f'<FAQ(id="{self.id}", product="{self.product_id}", sort="{self.sort}")>'

class SalesFAQ(Base):
    """Sales question and answer shown to buyers."""
    
    __tablename__ = 'faq_sales'
    
    id = Column(String, primary_key=True)
    product_id = Column(String, ForeignKey('products.id'), nullable=False, index=True)
    question = Column(String, nullable=False)
    answer = Column(String, nullable=False)
    code_liner = Column(String, nullable=False)
    sort = Column(Integer, nullable=False)
    
    def __repr__(self):
        """Return string representation."""
        return f'<SalesFAQ(id="{self.id}", product="{self.product_id}", sort="{self.sort}")>'
