"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by
the orders handler.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class OrdersHandlerEnvVars(BaseModel):
    """Environment variables for the orders handler."""

    # DynamoDB table name for storing orders
    TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for order storage',
        min_length=1
    )] = 'Orders'

    # Endpoint override, e.g. DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        description='DynamoDB endpoint URL for local testing'
    )] = None

    # Falls back to the boto3 default chain when unset
    AWS_REGION: Annotated[Optional[str], Field(
        description='AWS region of the orders table'
    )] = None


def get_handler_env_vars() -> OrdersHandlerEnvVars:
    """
    Get typed environment variables for the orders handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=OrdersHandlerEnvVars)
