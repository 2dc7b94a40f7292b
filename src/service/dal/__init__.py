"""
Data Access Layer (DAL) for the orders service.

This module provides the data access layer interface and the factory that
builds the DynamoDB implementation.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from service.models.order import Order


@runtime_checkable
class DalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    def put_order(self, order: Order) -> None:
        """Write an order, replacing any order with the same ID."""
        ...

    def query_orders_by_id(self, order_id: str) -> List[Order]:
        """Return every order stored under the given ID."""
        ...

    def scan_orders(self) -> List[Order]:
        """Return every order in the table."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for data access layer implementations."""

    def __init__(self, table_name: str) -> None:
        """
        Initialize the DAL handler.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def put_order(self, order: Order) -> None:
        """Write an order, replacing any order with the same ID."""
        pass

    @abstractmethod
    def query_orders_by_id(self, order_id: str) -> List[Order]:
        """Return every order stored under the given ID."""
        pass

    @abstractmethod
    def scan_orders(self) -> List[Order]:
        """Return every order in the table."""
        pass


def get_dal_handler(
    table_name: str,
    endpoint_url: Optional[str] = None,
    region_name: Optional[str] = None,
) -> DalHandler:
    """
    Factory function to get the DynamoDB DAL handler.

    Args:
        table_name: Name of the DynamoDB table
        endpoint_url: Optional endpoint override for local testing
        region_name: Optional AWS region, boto3 default chain when omitted

    Returns:
        DAL handler instance

    Raises:
        StoreInitializationError: If the DynamoDB client cannot be created
    """
    # Import here to avoid circular imports
    from service.dal.db_handler import DynamoDbHandler, create_dynamodb_client

    client = create_dynamodb_client(endpoint_url=endpoint_url, region_name=region_name)
    return DynamoDbHandler(table_name, client)


__all__ = [
    'DalHandler',
    'BaseDalHandler',
    'get_dal_handler'
]
