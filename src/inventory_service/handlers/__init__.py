"""
AWS Lambda Handlers Module.

One module per inventory operation, each exposing ``lambda_handler`` as the
function entry point:

- create_inventory_item: POST /inventory
- get_inventory: GET /inventory?name=<substring>
- update_inventory_item: PUT /inventory/{id}
- delete_inventory_item: DELETE /inventory/{id}

Handlers validate the request, consult the data access layer and map its
results to HTTP status codes. Shared pieces live in ``handlers.utils``.
"""

from inventory_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
