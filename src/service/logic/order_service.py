"""
Business Logic Layer for Order Management.

The orders service has little logic of its own: it assigns the creation
timestamp and hands each operation to the data access layer, recording
metrics for the outcome.
"""

from typing import List

from aws_lambda_powertools.metrics import MetricUnit

from service.dal import DalHandler
from service.handlers.utils.observability import logger, metrics, tracer
from service.models.order import Order


class OrderService:
    """Business logic service for order management."""

    def __init__(self, orders_dal: DalHandler):
        """
        Initialize order service.

        Args:
            orders_dal: Data access layer for the orders table
        """
        self.orders_dal = orders_dal

    @tracer.capture_method
    def create_order(self, order: Order) -> Order:
        """
        Store an order, replacing any existing order with the same ID.

        Args:
            order: Order parsed from the request

        Returns:
            The order as stored, with createdAt assigned when it was empty

        Raises:
            StoreError: If the write fails
        """
        order = order.with_default_created_at()

        logger.info("Creating order", extra={
            "order_id": order.order_id,
            "product": order.product,
            "quantity": order.quantity,
        })

        self.orders_dal.put_order(order)

        metrics.add_metric(name="OrderCreated", unit=MetricUnit.Count, value=1)
        tracer.put_annotation("order_id", order.order_id)

        return order

    @tracer.capture_method
    def get_orders_by_id(self, order_id: str) -> List[Order]:
        """
        Get every order stored under an ID.

        Args:
            order_id: Order identifier

        Returns:
            Matching orders; an empty list means the order does not exist

        Raises:
            StoreError: If the query fails
        """
        tracer.put_annotation("order_id", order_id)

        orders = self.orders_dal.query_orders_by_id(order_id)

        metrics.add_metric(name="OrdersFetched", unit=MetricUnit.Count, value=len(orders))
        return orders

    @tracer.capture_method
    def list_orders(self) -> List[Order]:
        """
        List every order in the table.

        Raises:
            StoreError: If the scan fails
        """
        orders = self.orders_dal.scan_orders()

        metrics.add_metric(name="OrdersFetched", unit=MetricUnit.Count, value=len(orders))
        logger.info("Orders listed", extra={"orders_count": len(orders)})
        return orders
