"""
Centralized observability utilities for the inventory Lambda handlers.

This module provides configured instances of AWS Lambda Powertools for logging,
tracing, and metrics collection shared by the handler and data access layers.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'InventoryService'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer()

# Namespace can be overridden by environment variable POWERTOOLS_METRICS_NAMESPACE
metrics = Metrics(namespace=METRICS_NAMESPACE)
