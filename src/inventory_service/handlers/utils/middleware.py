"""
HTTP event middleware for API Gateway proxy events.

Normalizes the incoming event, parses JSON bodies and adds CORS headers to the
outgoing response, so the handlers only deal with plain dictionaries.
"""

import json
import re
from decimal import Decimal
from functools import partial
from http import HTTPStatus
from typing import Any, Dict

from aws_lambda_powertools.event_handler import CORSConfig
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from inventory_service.handlers.models.env_vars import get_handler_env_vars
from inventory_service.handlers.utils.http_response import response
from inventory_service.handlers.utils.observability import logger

INVALID_JSON_MESSAGE = 'Content type defined as JSON but an invalid JSON was provided'

_JSON_MIME_PATTERN = re.compile(r'^application/(.+\+)?json($|;.+)')
_NORMALIZED_PARAMETERS = ('pathParameters', 'queryStringParameters', 'multiValueQueryStringParameters')

# Numbers stay Decimal so they can be written to DynamoDB unchanged
_json_deserializer = partial(json.loads, parse_float=Decimal)


def normalize_http_event(event: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of the event where missing parameter maps are empty dictionaries."""
    normalized = dict(event)
    for key in _NORMALIZED_PARAMETERS:
        if normalized.get(key) is None:
            normalized[key] = {}
    return normalized


def parse_json_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of the event with a JSON string body decoded.

    Only non-empty bodies sent with a JSON content type are parsed; anything
    else is returned untouched.

    Raises:
        ValueError: If the body is not valid JSON or not valid base64
    """
    proxy_event = APIGatewayProxyEvent(event, json_deserializer=_json_deserializer)

    content_type = (proxy_event.headers.get('content-type') or '').lower()
    if not isinstance(proxy_event.body, str) or not proxy_event.body or not _JSON_MIME_PATTERN.match(content_type):
        return event

    return {**proxy_event.raw_event, 'body': proxy_event.json_body}


def add_cors_headers(result: Dict[str, Any], allow_origin: str) -> Dict[str, Any]:
    """Return a copy of the response with the CORS headers for ``allow_origin`` set."""
    headers = CORSConfig(allow_origin=allow_origin).to_dict(allow_origin)
    headers.update(result.get('headers') or {})
    return {**result, 'headers': headers}


@lambda_handler_decorator
def http_event_middleware(handler, event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Powertools middleware wrapping an inventory handler."""
    event = normalize_http_event(event)

    try:
        event = parse_json_body(event)
    except ValueError as e:
        logger.warning('Request body is not valid JSON', extra={'error': str(e)})
        result = response(HTTPStatus.UNPROCESSABLE_ENTITY, {'message': INVALID_JSON_MESSAGE})
    else:
        result = handler(event, context)

    return add_cors_headers(result, get_handler_env_vars().CORS_ALLOW_ORIGIN)
