"""
Process-wide DynamoDB resource.

The resource is built on first use and reused for the lifetime of the Lambda
execution environment, so warm invocations skip client construction.
"""

from typing import Optional

import boto3

from inventory_service.handlers.models.env_vars import get_handler_env_vars
from inventory_service.handlers.utils.observability import logger

_dynamodb_resource = None


def get_dynamodb_resource(endpoint_url: Optional[str] = None):
    """
    Get or create the DynamoDB service resource.

    Args:
        endpoint_url: Endpoint override; defaults to DYNAMODB_ENDPOINT

    Returns:
        boto3 DynamoDB ServiceResource
    """
    global _dynamodb_resource

    if _dynamodb_resource is None:
        endpoint_url = endpoint_url or get_handler_env_vars().DYNAMODB_ENDPOINT
        _dynamodb_resource = boto3.resource('dynamodb', endpoint_url=endpoint_url)
        logger.debug('DynamoDB resource created', extra={'endpoint_url': endpoint_url})

    return _dynamodb_resource
