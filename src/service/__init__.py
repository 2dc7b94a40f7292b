"""
Orders Function Service Module.

This package contains the service implementation, laid out in three layers:

- handlers: Lambda handler and entry point utilities
- logic: Order operations
- dal: Data access layer for the DynamoDB orders table
- models: Data models and schemas
"""

__version__ = "1.0.0"
__description__ = "Serverless orders API backed by DynamoDB"

# Re-export commonly used classes for convenience
from service.models.order import Order
from service.models.output import MessageOutput
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "Order",
    "MessageOutput",
    "logger",
    "tracer",
    "metrics",
]
