"""
Create Inventory Item Handler - Lambda function for POST /inventory.

Validates the payload, rejects names already present in the inventory and
stores the new item.
"""

from http import HTTPStatus
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from inventory_service.dal import get_dal_handler
from inventory_service.handlers.utils.http_response import SOMETHING_WENT_WRONG_MESSAGE, response
from inventory_service.handlers.utils.middleware import http_event_middleware
from inventory_service.handlers.utils.observability import logger, metrics, tracer
from inventory_service.handlers.utils.validation import MISSING_FIELDS_MESSAGE, parse_item_payload
from inventory_service.models.inventory import InventoryItemSearch


@tracer.capture_method
def create_inventory_item(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a new inventory item.

    Args:
        event: Normalized API Gateway event with a parsed JSON body

    Returns:
        201 with the new item ID, 422 for missing fields, 400 for a duplicate
        name or a failed write, 500 for anything unexpected
    """
    try:
        item = parse_item_payload(event.get('body'))
        if item is None:
            metrics.add_metric(name='InventoryValidationError', unit=MetricUnit.Count, value=1)
            return response(HTTPStatus.UNPROCESSABLE_ENTITY, {'message': MISSING_FIELDS_MESSAGE})

        tracer.put_annotation('item_name', item.name)
        dal = get_dal_handler()

        if dal.list_items(InventoryItemSearch(name=item.name)):
            logger.info('Inventory item name already taken', extra={'item_name': item.name})
            metrics.add_metric(name='InventoryItemDuplicate', unit=MetricUnit.Count, value=1)
            return response(HTTPStatus.BAD_REQUEST, {'message': f'{item.name} already exists.'})

        item_id = dal.create_item(item)
        if not item_id:
            return response(HTTPStatus.BAD_REQUEST, {'message': 'Failed to create new inventory item.'})

        metrics.add_metric(name='InventoryItemCreated', unit=MetricUnit.Count, value=1)
        return response(HTTPStatus.CREATED, {'message': f'Successfully created new inventory item: {item_id}'})

    except Exception:
        logger.exception('Unexpected error creating inventory item')
        metrics.add_metric(name='UnexpectedError', unit=MetricUnit.Count, value=1)
        return response(HTTPStatus.INTERNAL_SERVER_ERROR, {'message': SOMETHING_WENT_WRONG_MESSAGE})


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@http_event_middleware
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return create_inventory_item(event)
