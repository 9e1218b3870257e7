"""Read access to the light-type catalog."""

import logging
from typing import List

from ..db.store import RelationalStore
from ..db.models import LightType
from .resolver import LightTypeEntry

class LightTypeCatalog:
    """Lists the externally maintained light-type catalog."""
    
    def __init__(self, store: RelationalStore):
        self.store = store
        self.logger = logging.getLogger(self.__class__.__name__)
    
    def list(self) -> List[LightTypeEntry]:
        """Return a snapshot of all catalog entries."""
        rows = self.store.select_all(LightType.__tablename__)
        entries = [LightTypeEntry(id=row['id'], name=row['name']) for row in rows]
        self.logger.debug(f"Loaded {len(entries)} light types")
        return entries
