"""
Data Access Layer (DAL) for the inventory service.

This module provides the data access layer interface and the factory used by
the handlers to obtain a concrete implementation.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from inventory_service.models.inventory import InventoryItem, InventoryItemSearch


@runtime_checkable
class DalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    def list_items(self, search: InventoryItemSearch) -> list[InventoryItem]:
        """List items whose name contains the search name."""
        ...

    def get_item(self, search: InventoryItemSearch) -> InventoryItem | None:
        """Retrieve an item by its ID."""
        ...

    def create_item(self, item: InventoryItem) -> str | None:
        """Store a new item and return its generated ID."""
        ...

    def update_item(self, item_id: str, item: InventoryItem) -> str | None:
        """Overwrite the mutable attributes of an item."""
        ...

    def delete_item(self, item_id: str) -> str | None:
        """Delete an item by its ID."""
        ...


class BaseDalHandler(ABC):
    """
    Abstract base class for data access layer implementations.

    Implementations never raise store failures to the caller: they log them
    and return ``None`` (or an empty list for ``list_items``), the same value
    used when nothing was found.
    """

    def __init__(self, table_name: str) -> None:
        """
        Initialize the DAL handler.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def list_items(self, search: InventoryItemSearch) -> list[InventoryItem]:
        """List items whose name contains the search name."""
        pass

    @abstractmethod
    def get_item(self, search: InventoryItemSearch) -> InventoryItem | None:
        """Retrieve an item by its ID."""
        pass

    @abstractmethod
    def create_item(self, item: InventoryItem) -> str | None:
        """Store a new item and return its generated ID."""
        pass

    @abstractmethod
    def update_item(self, item_id: str, item: InventoryItem) -> str | None:
        """Overwrite the mutable attributes of an item."""
        pass

    @abstractmethod
    def delete_item(self, item_id: str) -> str | None:
        """Delete an item by its ID."""
        pass


def get_dal_handler(table_name: Optional[str] = None) -> DalHandler:
    """
    Factory function to get the DAL handler for the inventory table.

    Args:
        table_name: Table name; defaults to INVENTORY_TABLE_NAME

    Returns:
        DAL handler instance bound to the shared DynamoDB resource
    """
    # Import here to avoid circular imports
    from inventory_service.dal.dynamodb_client import get_dynamodb_resource
    from inventory_service.dal.dynamodb_handler import DynamoDbHandler
    from inventory_service.handlers.models.env_vars import get_handler_env_vars

    table_name = table_name or get_handler_env_vars().INVENTORY_TABLE_NAME
    return DynamoDbHandler(table_name, dynamodb=get_dynamodb_resource())


__all__ = [
    'DalHandler',
    'BaseDalHandler',
    'get_dal_handler'
]
