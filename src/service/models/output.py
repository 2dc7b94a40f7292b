"""
Output models for API responses using Pydantic.

This module defines the bodies returned by the orders handler.
"""

from typing import Annotated, List

from pydantic import BaseModel, Field, TypeAdapter

from service.models.order import Order


class MessageOutput(BaseModel):
    """Response body carrying a single human readable message."""

    message: Annotated[str, Field(
        description='Outcome of the request',
        examples=['Order created successfully', 'Order not found'],
    )]


# Fetch responses are bare JSON arrays of orders
OrderListOutput = TypeAdapter(List[Order])
