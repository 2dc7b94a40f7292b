"""
AWS Lambda Handlers Module.

This module contains the Lambda handler that serves as the entry point of the
orders service. The handler implements the outer layer of the three-layer
architecture pattern:

1. Handler Layer (this module): Request/response handling, parsing, routing
2. Logic Layer: Order operations
3. Data Access Layer: DynamoDB persistence

The handler uses AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
- Typed access to API Gateway events
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
