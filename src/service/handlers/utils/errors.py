"""
Error classification utilities for the orders service.

Every failure the service reports is raised as a BaseServiceError subclass
carrying a machine readable code, a category, and the message that is safe
to return to API callers. The real cause stays in the logs.
"""

import uuid
from enum import Enum
from typing import Any, Dict, Optional

from aws_lambda_powertools.metrics import MetricUnit

from service.handlers.utils.observability import logger, metrics, tracer


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    INFRASTRUCTURE = "INFRASTRUCTURE"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    metric_name = "ServiceError"

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory = ErrorCategory.INFRASTRUCTURE,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.user_message = user_message or "An error occurred while processing your request."
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "error_message": self.message,
            "user_message": self.user_message,
            "category": self.category.value,
        }


class InvalidRequestError(BaseServiceError):
    """Raised when a request body cannot be parsed as an order."""

    metric_name = "InvalidRequest"

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="INVALID_REQUEST_BODY",
            category=ErrorCategory.VALIDATION,
            user_message="Invalid request body",
        )


class StoreError(BaseServiceError):
    """Raised when a call to the orders table fails."""

    metric_name = "StoreError"

    def __init__(self, message: str, operation: str, table_name: str):
        super().__init__(
            message=message,
            error_code="STORE_ERROR",
            category=ErrorCategory.INFRASTRUCTURE,
        )
        self.operation = operation
        self.table_name = table_name

    def to_dict(self) -> Dict[str, Any]:
        error = super().to_dict()
        error.update({"operation": self.operation, "table_name": self.table_name})
        return error


class StoreInitializationError(BaseServiceError):
    """Raised when the DynamoDB client cannot be created."""

    metric_name = "StoreInitializationError"

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="STORE_INITIALIZATION_ERROR",
            category=ErrorCategory.INFRASTRUCTURE,
        )


def log_error_metrics(error: BaseServiceError) -> None:
    """Record a service error in logs, traces and metrics."""
    metrics.add_metric(name=error.metric_name, unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    logger.error("Service error occurred", extra=error.to_dict())
