"""
Order domain model.

This module defines the Order record exchanged with API callers and persisted
in the orders table. Field names on the wire are camelCase; every field is
optional and falls back to its zero value.
"""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

RFC3339_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

# Signed 64-bit range
QUANTITY_MIN = -2**63
QUANTITY_MAX = 2**63 - 1


def utc_now_rfc3339() -> str:
    """Return the current UTC time formatted as an RFC3339 timestamp."""
    return datetime.now(timezone.utc).strftime(RFC3339_FORMAT)


class Order(BaseModel):
    """Order record, the single entity handled by the service."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra='ignore',
        json_schema_extra={
            'example': {
                'orderId': 'd9dcde4b-b163-4176-8d1a-f49d270a2f5e',
                'customerName': 'Siri',
                'product': 'Lunch Box',
                'quantity': 1,
                'status': 'CREATED',
                'createdAt': '2024-01-15T10:30:00Z',
            }
        },
    )

    order_id: Annotated[str, Field(
        alias='orderId',
        strict=True,
        description='Order identifier, partition key of the orders table',
    )] = ''

    customer_name: Annotated[str, Field(
        alias='customerName',
        strict=True,
        description='Customer name, free text',
    )] = ''

    product: Annotated[str, Field(
        strict=True,
        description='Ordered product, free text',
    )] = ''

    quantity: Annotated[int, Field(
        strict=True,
        ge=QUANTITY_MIN,
        le=QUANTITY_MAX,
        description='Number of units ordered',
    )] = 0

    status: Annotated[str, Field(
        strict=True,
        description='Order status, free text',
    )] = ''

    created_at: Annotated[str, Field(
        alias='createdAt',
        strict=True,
        description='RFC3339 creation timestamp',
    )] = ''

    @model_validator(mode='before')
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Treat explicit JSON nulls like absent fields."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def with_default_created_at(self) -> 'Order':
        """
        Return the order with createdAt filled in.

        An order that already carries a timestamp is returned unchanged.
        """
        if self.created_at:
            return self
        return self.model_copy(update={'created_at': utc_now_rfc3339()})
