"""
Get Inventory Handler - Lambda function for GET /inventory.

Lists the items whose name contains the optional ``name`` query parameter.
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
def get_inventory(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Search inventory items by name.

    Args:
        event: Normalized API Gateway event

    Returns:
        200 with the matching items, 404 when nothing matches, 500 for
        anything unexpected
    """
    try:
        name = event['queryStringParameters'].get('name') or ''

        items = get_dal_handler().list_items(InventoryItemSearch(name=name))

        if not items:
            return response(HTTPStatus.NOT_FOUND, {'message': 'Inventory item not found.'})

        return response(HTTPStatus.OK, {'items': [item.to_response() for item in items]})

    except Exception:
        logger.exception('Unexpected error listing inventory items')
        metrics.add_metric(name='UnexpectedError', unit=MetricUnit.Count, value=1)
        return response(HTTPStatus.INTERNAL_SERVER_ERROR, {'message': SOMETHING_WENT_WRONG_MESSAGE})


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@http_event_middleware
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return get_inventory(event)
