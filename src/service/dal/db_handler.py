"""
DynamoDB implementation of the Data Access Layer (DAL).

Each operation is a single round trip (or one paginated read) against the
orders table through the low-level DynamoDB client. Failures are logged and
re-raised as StoreError; nothing is retried here.
"""

from typing import Any, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from service.dal import BaseDalHandler
from service.dal.mapping import item_to_order, order_to_item
from service.handlers.utils.errors import StoreError, StoreInitializationError
from service.handlers.utils.observability import logger, tracer
from service.models.order import Order


def create_dynamodb_client(endpoint_url: Optional[str] = None, region_name: Optional[str] = None) -> Any:
    """
    Create the low-level DynamoDB client.

    Args:
        endpoint_url: Optional endpoint override (DynamoDB Local)
        region_name: Optional region, boto3 default chain when omitted

    Returns:
        boto3 DynamoDB client

    Raises:
        StoreInitializationError: If boto3 cannot build the client
    """
    client_config = {}
    if endpoint_url:
        client_config['endpoint_url'] = endpoint_url
    if region_name:
        client_config['region_name'] = region_name

    try:
        client = boto3.client('dynamodb', **client_config)
    except BotoCoreError as e:
        logger.exception('Failed to create DynamoDB client', extra=client_config)
        raise StoreInitializationError(f'Failed to create DynamoDB client: {e}') from e

    logger.debug('DynamoDB client created', extra=client_config)
    return client


class DynamoDbHandler(BaseDalHandler):
    """DynamoDB implementation of the data access layer."""

    def __init__(self, table_name: str, client: Any) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            client: boto3 DynamoDB client shared across invocations
        """
        super().__init__(table_name)
        self.client = client
        logger.debug(f'DynamoDB handler initialized for table: {table_name}')

    @tracer.capture_method
    def put_order(self, order: Order) -> None:
        """
        Write an order unconditionally, replacing any previous order with the same ID.

        Args:
            order: Order to store

        Raises:
            StoreError: If the PutItem call fails
        """
        try:
            self.client.put_item(TableName=self.table_name, Item=order_to_item(order))
        except (ClientError, BotoCoreError) as e:
            raise self._store_error('PutItem', e, order_id=order.order_id) from e

        logger.info(f'Successfully stored order: {order.order_id}')
        tracer.put_annotation('order_stored', order.order_id)

    @tracer.capture_method
    def query_orders_by_id(self, order_id: str) -> List[Order]:
        """
        Query every order whose partition key equals order_id.

        Args:
            order_id: Order identifier

        Returns:
            Matching orders, empty when none exist

        Raises:
            StoreError: If the Query call fails
        """
        paginator = self.client.get_paginator('query')
        try:
            items = [
                item
                for page in paginator.paginate(
                    TableName=self.table_name,
                    KeyConditionExpression='orderId = :oid',
                    ExpressionAttributeValues={':oid': {'S': order_id}},
                )
                for item in page.get('Items', [])
            ]
        except (ClientError, BotoCoreError) as e:
            raise self._store_error('Query', e, order_id=order_id) from e

        logger.debug(f'Query returned {len(items)} items for order: {order_id}')
        tracer.put_annotation('order_query_count', len(items))
        return [item_to_order(item) for item in items]

    @tracer.capture_method
    def scan_orders(self) -> List[Order]:
        """
        Scan the whole table, following pagination until exhausted.

        Returns:
            Every stored order, in the order DynamoDB returns them

        Raises:
            StoreError: If a Scan call fails
        """
        paginator = self.client.get_paginator('scan')
        try:
            items = [
                item
                for page in paginator.paginate(TableName=self.table_name)
                for item in page.get('Items', [])
            ]
        except (ClientError, BotoCoreError) as e:
            raise self._store_error('Scan', e) from e

        logger.debug(f'Scan returned {len(items)} items')
        tracer.put_annotation('order_scan_count', len(items))
        return [item_to_order(item) for item in items]

    def _store_error(self, operation: str, error: Exception, **extra: Any) -> StoreError:
        if isinstance(error, ClientError):
            error_code = error.response.get('Error', {}).get('Code', 'Unknown')
        else:
            error_code = type(error).__name__

        logger.error(f'DynamoDB {operation} error: {error_code}', extra={
            'error': str(error),
            'table_name': self.table_name,
            **extra,
        })
        return StoreError(
            message=f'DynamoDB {operation} failed: {error}',
            operation=operation,
            table_name=self.table_name,
        )
