"""Declarative base for all models."""

from typing import Any, Dict

from sqlalchemy import inspect
from sqlalchemy.orm import declarative_base

class RowMixin:
    """Row helpers shared by all models."""

    def to_dict(self) -> Dict[str, Any]:
        """Return column attributes keyed by their Python attribute names."""
        return {
            attr.key: getattr(self, attr.key)
            for attr in inspect(self).mapper.column_attrs
        }

Base = declarative_base(cls=RowMixin)
