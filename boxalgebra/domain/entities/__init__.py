"""Entities - ordered box collections and their index maps."""

from .box_array import BoxArray, IndexMap

__all__ = ['BoxArray', 'IndexMap']
