"""
Environment variable models for type-safe configuration.

The inventory handlers read their settings through aws-lambda-env-modeler so a
misconfigured function fails on the first invocation with a validation error
instead of half-working against the wrong table.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field


class InventoryHandlerEnvVars(BaseModel):
    """Environment variables for the inventory handlers."""

    INVENTORY_TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for inventory items',
        min_length=1
    )]

    # Only set when running against DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        description='DynamoDB endpoint URL override'
    )] = None

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        description='Value of the Access-Control-Allow-Origin response header'
    )] = '*'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'inventory-service'

    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'


def get_handler_env_vars() -> InventoryHandlerEnvVars:
    """
    Get typed environment variables for the inventory handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=InventoryHandlerEnvVars)
