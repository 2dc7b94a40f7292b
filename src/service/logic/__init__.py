"""
Business Logic Layer Module.

This module contains the business logic of the orders service, the middle
layer between the Lambda handler and the data access layer.
"""

from service.logic.order_service import OrderService

__all__ = [
    "OrderService",
]
