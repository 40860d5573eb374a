"""
Pytest configuration and shared fixtures for the inventory service.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import json
import os

# Must be set before the service modules create their Powertools singletons
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "INVENTORY_TABLE_NAME": "test-inventory-table",
    "POWERTOOLS_SERVICE_NAME": "test-inventory-service",
    "POWERTOOLS_METRICS_NAMESPACE": "TestInventoryService",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LOG_LEVEL": "DEBUG",
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",  # Re-read env vars on every lookup
})

from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from inventory_service.dal import dynamodb_client
from inventory_service.handlers.utils.observability import metrics
from inventory_service.models.inventory import InventoryItem

TABLE_NAME = "test-inventory-table"


@pytest.fixture(autouse=True)
def reset_process_state():
    """Reset the cached DynamoDB resource and metrics between tests."""
    dynamodb_client._dynamodb_resource = None
    metrics.clear_metrics()
    yield
    dynamodb_client._dynamodb_resource = None
    metrics.clear_metrics()


# DynamoDB fixtures
@pytest.fixture
def dynamodb_table():
    """Create a mock DynamoDB inventory table for testing."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": "name", "AttributeType": "S"},
                {"AttributeName": "createdAt", "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": "nameAndCreatedAt",
                    "KeySchema": [
                        {"AttributeName": "name", "KeyType": "HASH"},
                        {"AttributeName": "createdAt", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()
        yield table


# Sample data fixtures
@pytest.fixture
def sample_item() -> InventoryItem:
    """Create a sample inventory item for testing."""
    return InventoryItem(name="test-item-name", quantity=20, unit_price=30)


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Build API Gateway proxy events for testing."""

    def build(
        http_method: str = "GET",
        path: str = "/inventory",
        body: Optional[Any] = None,
        path_parameters: Optional[Dict[str, str]] = None,
        query_string_parameters: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        return {
            "httpMethod": http_method,
            "path": path,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "body": json.dumps(body) if body is not None else None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": http_method,
                "path": path,
            },
            "pathParameters": path_parameters,
            "queryStringParameters": query_string_parameters,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return build


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = "512"
    context.remaining_time_in_millis = lambda: 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Build DynamoDB client errors for testing error handling."""

    def create_error(error_code: str, message: str = "Test error"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name="TestOperation"
        )

    return create_error


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
