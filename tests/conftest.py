"""
Pytest configuration and shared fixtures for the orders function.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import base64
import json
import os
from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

import pytest

# Must be in place before the service modules are imported
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "testing",
    "AWS_SECRET_ACCESS_KEY": "testing",
    "AWS_SECURITY_TOKEN": "testing",
    "AWS_SESSION_TOKEN": "testing",
    "TABLE_NAME": "Orders",
    "POWERTOOLS_SERVICE_NAME": "test-orders-function",
    "POWERTOOLS_METRICS_NAMESPACE": "TestOrdersFunction",
    "POWERTOOLS_TRACE_DISABLED": "true",
    "POWERTOOLS_LOG_LEVEL": "DEBUG",
})

import boto3
from moto import mock_aws

from service.dal.db_handler import DynamoDbHandler
from service.handlers import orders_handler
from service.handlers.utils.observability import metrics
from service.logic.order_service import OrderService

TABLE_NAME = "Orders"


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Create a mocked DynamoDB client with an empty orders table."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="us-east-1")
        client.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{"AttributeName": "orderId", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "orderId", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        yield client


@pytest.fixture
def orders_dal(dynamodb_client) -> DynamoDbHandler:
    return DynamoDbHandler(TABLE_NAME, dynamodb_client)


@pytest.fixture
def order_service(orders_dal) -> OrderService:
    return OrderService(orders_dal=orders_dal)


@pytest.fixture
def installed_order_service(order_service, monkeypatch) -> OrderService:
    """Install a moto-backed order service as the handler's process-wide service."""
    monkeypatch.setattr(orders_handler, "_order_service", order_service)
    return order_service


@pytest.fixture
def mock_order_service(monkeypatch) -> Mock:
    """Install a mock order service as the handler's process-wide service."""
    service = Mock(spec=OrderService)
    monkeypatch.setattr(orders_handler, "_order_service", service)
    return service


# Sample data fixtures
@pytest.fixture
def sample_order_data() -> Dict[str, Any]:
    """Sample order body for create requests."""
    return {
        "orderId": "20221",
        "customerName": "Siri",
        "product": "Lunch Box",
        "quantity": 1,
        "status": "CREATED",
    }


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway REST proxy events."""

    def make_event(
        http_method: str,
        order_id: Optional[str] = None,
        body: Any = None,
        base64_encoded: bool = False,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        if body is not None and base64_encoded:
            body = base64.b64encode(body.encode()).decode()

        path = "/orders" if order_id is None else f"/orders/{order_id}"
        return {
            "resource": "/orders" if order_id is None else "/orders/{orderId}",
            "path": path,
            "httpMethod": http_method,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": None if order_id is None else {"orderId": order_id},
            "stageVariables": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": http_method,
                "path": path,
                "resourcePath": "/orders",
                "identity": {"sourceIp": "127.0.0.1"},
            },
            "body": body,
            "isBase64Encoded": base64_encoded,
        }

    return make_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-orders-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-orders-function"
    context.memory_limit_in_mb = 128
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-orders-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset process-wide state between tests."""
    orders_handler._order_service = None
    metrics.clear_metrics()
    yield
    orders_handler._order_service = None
    metrics.clear_metrics()


# Pytest configuration
def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
