"""Light type catalog model definition."""

from sqlalchemy import Column, String

from .base import Base

class LightType(Base):
    """Entry of the externally maintained light-type catalog."""
    
    __tablename__ = 'light_types'
    
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    
    def __repr__(self):
        """Return string representation."""
        return f'<LightType(id="{self.id}", name="{self.name}")>'
