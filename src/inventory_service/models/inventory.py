"""
Inventory domain models.

Attribute aliases match the names stored in DynamoDB and used on the wire
(``unitPrice``, ``createdAt``); Python code uses the snake_case field names.
"""

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field


class InventoryItem(BaseModel):
    """A single inventory record."""

    model_config = ConfigDict(populate_by_name=True)

    id: Annotated[Optional[str], Field(
        description='Unique identifier, generated when the item is created',
        examples=['0b6a0f7e-3c1d-4d5e-9f58-2f1b6e0c9a11']
    )] = None

    name: Annotated[str, Field(
        min_length=1,
        description='Item name, unique at creation time',
        examples=['Widget']
    )]

    quantity: Annotated[Decimal, Field(
        description='Units in stock',
        examples=[20]
    )]

    unit_price: Annotated[Decimal, Field(
        alias='unitPrice',
        description='Price of a single unit',
        examples=[30]
    )]

    created_at: Annotated[Optional[str], Field(
        alias='createdAt',
        description='Creation date as MM-DD-YYYY',
        examples=['05-20-2020']
    )] = None

    def to_response(self) -> dict:
        """Wire representation, omitting attributes that were never set."""
        return self.model_dump(by_alias=True, exclude_none=True)


class InventoryItemSearch(BaseModel):
    """Lookup parameters for the data access layer. Never persisted."""

    id: Optional[str] = None
    name: Optional[str] = None
