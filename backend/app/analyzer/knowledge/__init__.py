"""
Knowledge Base System

Stored selector mappings served by the read-only lookup path.
"""

from .mapping_store import MappingStore, MappingStoreError, SelectorMapping

__all__ = [
    "MappingStore",
    "MappingStoreError",
    "SelectorMapping"
]
