"""
Unit tests for the service error taxonomy.
"""

from unittest.mock import patch

import pytest
from aws_lambda_powertools.metrics import MetricUnit

from service.handlers.orders_handler import lambda_handler
from service.handlers.utils import errors
from service.handlers.utils.errors import (
    ErrorCategory,
    InvalidRequestError,
    StoreError,
    StoreInitializationError,
    log_error_metrics,
)


class TestErrorClasses:
    """Test cases for the error classes."""

    def test_invalid_request_error(self):
        """Test the code, category and caller message of a rejected body."""
        error = InvalidRequestError("bad json")

        assert error.error_code == "INVALID_REQUEST_BODY"
        assert error.category == ErrorCategory.VALIDATION
        assert error.user_message == "Invalid request body"
        assert str(error) == "bad json"

    def test_store_error_details(self):
        """Test that store errors carry the failed operation and table."""
        error = StoreError(message="boom", operation="Query", table_name="Orders")

        details = error.to_dict()

        assert details["error_code"] == "STORE_ERROR"
        assert details["error_message"] == "boom"
        assert details["operation"] == "Query"
        assert details["table_name"] == "Orders"
        assert details["category"] == "INFRASTRUCTURE"

    def test_error_ids_are_unique(self):
        """Test that each error instance gets its own ID."""
        assert InvalidRequestError("a").error_id != InvalidRequestError("a").error_id


class TestLogErrorMetrics:
    """Test cases for log_error_metrics."""

    @pytest.mark.parametrize("error,metric_name", [
        (InvalidRequestError("bad json"), "InvalidRequest"),
        (StoreError(message="boom", operation="PutItem", table_name="Orders"), "StoreError"),
        (StoreInitializationError("no region"), "StoreInitializationError"),
    ])
    def test_metric_name(self, error, metric_name):
        """Test that each error is counted under its documented metric name."""
        with patch.object(errors.metrics, "add_metric") as mock_add_metric:
            log_error_metrics(error)

        mock_add_metric.assert_called_once_with(name=metric_name, unit=MetricUnit.Count, value=1)

    def test_invalid_body_counts_invalid_request(self, api_gateway_event, lambda_context, mock_order_service):
        """Test that a rejected POST body is counted as InvalidRequest."""
        with patch.object(errors.metrics, "add_metric") as mock_add_metric:
            response = lambda_handler(api_gateway_event("POST", body="{not json"), lambda_context)

        assert response["statusCode"] == 400
        metric_names = [call.kwargs["name"] for call in mock_add_metric.call_args_list]
        assert "InvalidRequest" in metric_names
        assert "InvalidRequestBody" not in metric_names
