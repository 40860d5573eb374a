"""
Update Inventory Item Handler - Lambda function for PUT /inventory/{id}.
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
def update_inventory_item(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Replace name, quantity and unit price of an existing item.

    Args:
        event: Normalized API Gateway event with an ``id`` path parameter and
            a parsed JSON body

    Returns:
        200 on success, 422 for missing fields, 404 for an unknown ID, 400 for
        a failed write, 500 for anything unexpected
    """
    try:
        item_id = event['pathParameters'].get('id')
        item = parse_item_payload(event.get('body'))
        if item is None:
            metrics.add_metric(name='InventoryValidationError', unit=MetricUnit.Count, value=1)
            return response(HTTPStatus.UNPROCESSABLE_ENTITY, {'message': MISSING_FIELDS_MESSAGE})

        tracer.put_annotation('item_id', str(item_id))
        dal = get_dal_handler()

        if not dal.get_item(InventoryItemSearch(id=item_id)):
            # The submitted name, not the stored one
            return response(HTTPStatus.NOT_FOUND, {'message': f'Item not found: {item.name}'})

        updated_id = dal.update_item(item_id, item)
        if not updated_id:
            return response(HTTPStatus.BAD_REQUEST, {'message': 'Failed to update an inventory item.'})

        metrics.add_metric(name='InventoryItemUpdated', unit=MetricUnit.Count, value=1)
        return response(HTTPStatus.OK, {'message': f'Successfully updated an inventory item: {updated_id}'})

    except Exception:
        logger.exception('Unexpected error updating inventory item')
        metrics.add_metric(name='UnexpectedError', unit=MetricUnit.Count, value=1)
        return response(HTTPStatus.INTERNAL_SERVER_ERROR, {'message': SOMETHING_WENT_WRONG_MESSAGE})


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@http_event_middleware
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return update_inventory_item(event)
