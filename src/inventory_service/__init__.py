"""
Inventory Service.

Serverless inventory management on AWS Lambda and DynamoDB, organized in the
three-layer architecture pattern:

- handlers: API handlers and entry points
- dal: Data access layer for persistence
- models: Data models
"""

__version__ = "1.0.0"

from inventory_service.models.inventory import InventoryItem, InventoryItemSearch

__all__ = [
    "InventoryItem",
    "InventoryItemSearch",
]
