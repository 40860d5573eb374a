"""
HTTP response envelope for the inventory handlers.

Every handler answers with ``{"statusCode": ..., "body": ...}`` where the body
is a JSON object holding either a ``message`` or an ``items`` list.
"""

import json
from decimal import Decimal
from typing import Any, Dict

SOMETHING_WENT_WRONG_MESSAGE = 'Something went wrong.'


def _json_default(value: Any) -> Any:
    # DynamoDB numbers come back as Decimal
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f'Object of type {type(value).__name__} is not JSON serializable')


def response(status: int, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response.

    Args:
        status: HTTP status code
        data: Object serialized as the JSON body

    Returns:
        Response dictionary with statusCode and body
    """
    return {
        'statusCode': int(status),
        'body': json.dumps(data, default=_json_default),
    }
