"""Object storage for product media."""

from .object_storage import ObjectStorage, LocalObjectStorage

__all__ = ['ObjectStorage', 'LocalObjectStorage']
