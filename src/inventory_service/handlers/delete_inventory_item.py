"""
Delete Inventory Item Handler - Lambda function for DELETE /inventory/{id}.
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
from inventory_service.models.inventory import InventoryItemSearch


@tracer.capture_method
def delete_inventory_item(event: Dict[str, Any]) -> Dict[str, Any]:
    try:
        item_id = event['pathParameters'].get('id')
        tracer.put_annotation('item_id', str(item_id))

        dal = get_dal_handler()

        if not dal.get_item(InventoryItemSearch(id=item_id)):
            return response(HTTPStatus.NOT_FOUND, {'message': f'Item not found: {item_id}'})

        deleted_id = dal.delete_item(item_id)
        if not deleted_id:
            return response(HTTPStatus.BAD_REQUEST, {'message': 'Failed to delete an inventory item.'})

        metrics.add_metric(name='InventoryItemDeleted', unit=MetricUnit.Count, value=1)
        return response(HTTPStatus.OK, {'message': f'Successfully deleted an inventory item: {deleted_id}'})

    except Exception:
        logger.exception('Unexpected error deleting inventory item')
        metrics.add_metric(name='UnexpectedError', unit=MetricUnit.Count, value=1)
        return response(HTTPStatus.INTERNAL_SERVER_ERROR, {'message': SOMETHING_WENT_WRONG_MESSAGE})


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@http_event_middleware
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return delete_inventory_item(event)
