"""
Service Models Package

This package contains the Pydantic models used throughout the service:
the Order domain model and the response bodies.
"""

from .order import Order, utc_now_rfc3339
from .output import MessageOutput, OrderListOutput

__all__ = [
    # Domain models
    "Order",
    "utc_now_rfc3339",

    # Output models
    "MessageOutput",
    "OrderListOutput",
]
