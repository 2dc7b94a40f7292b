"""
Centralized observability utilities for the orders Lambda handler.

This module provides configured instances of AWS Lambda Powertools for logging,
tracing, and metrics collection.
"""

import os

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Explicit constructor arguments take precedence over the POWERTOOLS_* variables,
# so the defaults are resolved here
SERVICE_NAME = os.getenv('POWERTOOLS_SERVICE_NAME', 'orders-function')
METRICS_NAMESPACE = os.getenv('POWERTOOLS_METRICS_NAMESPACE', 'OrdersFunction')

# JSON output format, level from POWERTOOLS_LOG_LEVEL or LOG_LEVEL
logger: Logger = Logger(service=SERVICE_NAME)

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer(service=SERVICE_NAME)

metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)
