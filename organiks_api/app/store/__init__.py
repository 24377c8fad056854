"""
Persistence layer: id allocation, generic entity stores and the
repository that owns them.
"""

from .entity_store import EntityStore
from .id_allocator import IdAllocator
from .repository import Repository

__all__ = ["EntityStore", "IdAllocator", "Repository"]
