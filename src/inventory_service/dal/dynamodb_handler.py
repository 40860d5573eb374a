"""
DynamoDB implementation of the inventory Data Access Layer (DAL).

Every operation converts store failures into an absence result (``None`` or
an empty list) after logging them, so handlers map "not found" and "store
unavailable" to the same HTTP status.
"""

import functools
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional
from uuid import uuid4

from aws_lambda_powertools.metrics import MetricUnit
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from inventory_service.dal import BaseDalHandler
from inventory_service.dal.dynamodb_client import get_dynamodb_resource
from inventory_service.handlers.utils.observability import logger, metrics, tracer
from inventory_service.models.inventory import InventoryItem, InventoryItemSearch

# Global secondary index: hash key "name", range key "createdAt"
NAME_INDEX = 'nameAndCreatedAt'
CREATED_AT_FORMAT = '%m-%d-%Y'


def _absorb_store_errors(operation: str, fallback: Callable[[], Any] = lambda: None):
    """Log store failures of a DAL method and return ``fallback()`` instead of raising."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except ClientError as e:
                error = e.response.get('Error', {})
                logger.error(f'DynamoDB {operation} error', extra={
                    'error_code': error.get('Code'),
                    'error_message': error.get('Message'),
                    'table_name': self.table_name,
                    'operation': operation,
                })
            except BotoCoreError as e:
                logger.error(f'DynamoDB connection error during {operation}', extra={
                    'error': str(e),
                    'table_name': self.table_name,
                })
            except ValidationError as e:
                logger.error(f'Malformed inventory item during {operation}', extra={
                    'error': str(e),
                    'table_name': self.table_name,
                })

            metrics.add_metric(name=f'DynamoDB{operation}Error', unit=MetricUnit.Count, value=1)
            return fallback()

        return wrapper

    return decorator


class DynamoDbHandler(BaseDalHandler):
    """DynamoDB implementation of the inventory data access layer."""

    def __init__(self, table_name: str, dynamodb: Optional[Any] = None) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            dynamodb: DynamoDB service resource; the shared process resource when omitted
        """
        super().__init__(table_name)
        self.dynamodb = dynamodb or get_dynamodb_resource()
        self.table = self.dynamodb.Table(table_name)

    @tracer.capture_method
    @_absorb_store_errors('Scan', fallback=list)
    def list_items(self, search: InventoryItemSearch) -> List[InventoryItem]:
        """
        List items whose name contains ``search.name``.

        An empty name matches every item in the index.

        Args:
            search: Search descriptor; only ``name`` is used

        Returns:
            Matching items, or an empty list when the scan fails
        """
        scan_kwargs = {
            'IndexName': NAME_INDEX,
            'FilterExpression': Attr('name').contains(search.name or ''),
        }

        records = []
        while True:
            response = self.table.scan(**scan_kwargs)
            records.extend(response.get('Items', []))

            last_evaluated_key = response.get('LastEvaluatedKey')
            if not last_evaluated_key:
                break
            scan_kwargs['ExclusiveStartKey'] = last_evaluated_key

        items = []
        for record in records:
            try:
                items.append(InventoryItem.model_validate(record))
            except ValidationError as e:
                logger.warning(f'Failed to parse inventory item: {e}', extra={'item': record})

        logger.info(f'Retrieved {len(items)} inventory items', extra={'search_name': search.name})
        return items

    @tracer.capture_method
    @_absorb_store_errors('GetItem')
    def get_item(self, search: InventoryItemSearch) -> Optional[InventoryItem]:
        """
        Retrieve an item by its ID.

        Args:
            search: Search descriptor; only ``id`` is used

        Returns:
            The item, or None if it does not exist or the lookup failed
        """
        response = self.table.get_item(Key={'id': search.id})

        record = response.get('Item')
        if not record:
            logger.info(f'Inventory item not found: {search.id}')
            return None

        return InventoryItem.model_validate(record)

    @tracer.capture_method
    @_absorb_store_errors('PutItem')
    def create_item(self, item: InventoryItem) -> Optional[str]:
        """
        Store a new item with a generated ID and creation date.

        No uniqueness check is made here.

        Args:
            item: Item attributes supplied by the caller

        Returns:
            The generated item ID, or None if the write failed
        """
        item_id = str(uuid4())
        created_at = datetime.now(timezone.utc).strftime(CREATED_AT_FORMAT)

        self.table.put_item(Item={
            'id': item_id,
            'createdAt': created_at,
            **item.model_dump(by_alias=True, exclude={'id', 'created_at'}, exclude_none=True),
        })

        logger.info(f'Successfully created inventory item: {item_id}')
        tracer.put_annotation('item_id', item_id)
        return item_id

    @tracer.capture_method
    @_absorb_store_errors('UpdateItem')
    def update_item(self, item_id: str, item: InventoryItem) -> Optional[str]:
        """
        Overwrite name, quantity and unit price of an item.

        Args:
            item_id: ID of the item to update
            item: New attribute values

        Returns:
            The item ID, or None if the update failed
        """
        self.table.update_item(
            Key={'id': item_id},
            UpdateExpression='SET #name = :name, quantity = :quantity, unitPrice = :unitPrice',
            ExpressionAttributeNames={'#name': 'name'},
            ExpressionAttributeValues={
                ':name': item.name,
                ':quantity': item.quantity,
                ':unitPrice': item.unit_price,
            },
        )

        logger.info(f'Successfully updated inventory item: {item_id}')
        tracer.put_annotation('item_id', item_id)
        return item_id

    @tracer.capture_method
    @_absorb_store_errors('DeleteItem')
    def delete_item(self, item_id: str) -> Optional[str]:
        """
        Delete an item by its ID.

        Args:
            item_id: ID of the item to delete

        Returns:
            The item ID, or None if the delete failed
        """
        self.table.delete_item(Key={'id': item_id})

        logger.info(f'Successfully deleted inventory item: {item_id}')
        tracer.put_annotation('item_id', item_id)
        return item_id
