"""
Service Models Package

Pydantic models for inventory records and the search descriptors passed to
the data access layer.
"""

from .inventory import InventoryItem, InventoryItemSearch

__all__ = [
    "InventoryItem",
    "InventoryItemSearch",
]
