"""
Request payload validation shared by the create and update handlers.
"""

from typing import Any, Optional

from pydantic import ValidationError

from inventory_service.handlers.utils.observability import logger
from inventory_service.models.inventory import InventoryItem

MISSING_FIELDS_MESSAGE = 'Please enter name, quantity and unit price.'


def parse_item_payload(body: Any) -> Optional[InventoryItem]:
    """
    Build an inventory item from a request body.

    ``name``, ``quantity`` and ``unitPrice`` must all be truthy, so ``0`` and
    empty strings are rejected along with missing keys.

    Args:
        body: Parsed JSON request body, or the raw body when it was not sent as JSON

    Returns:
        The item, or None when a field is missing or not of a usable type
    """
    # A body left unparsed by the middleware carries no fields
    if isinstance(body, str):
        return None

    name = body.get('name')
    quantity = body.get('quantity')
    unit_price = body.get('unitPrice')

    if not name or not quantity or not unit_price:
        return None

    try:
        return InventoryItem.model_validate({
            'name': name,
            'quantity': quantity,
            'unitPrice': unit_price,
        })
    except ValidationError as e:
        logger.warning('Invalid inventory item payload', extra={'validation_errors': str(e)})
        return None
