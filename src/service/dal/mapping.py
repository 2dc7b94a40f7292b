"""
Conversion between Order models and DynamoDB attribute-value items.

Items use the low-level DynamoDB representation: strings are stored as
{"S": value} and the quantity as {"N": "<int>"}. Reading an item never
fails; an attribute that is missing or has the wrong type falls back to the
field's zero value and is reported as a warning.
"""

from typing import Any, Dict

from service.handlers.utils.observability import logger
from service.models.order import QUANTITY_MAX, QUANTITY_MIN, Order

STRING_ATTRIBUTES = ('orderId', 'customerName', 'product', 'status', 'createdAt')
NUMBER_ATTRIBUTES = ('quantity',)

Item = Dict[str, Dict[str, Any]]


def order_to_item(order: Order) -> Item:
    """Convert an Order into a DynamoDB item."""
    return {
        'orderId': {'S': order.order_id},
        'customerName': {'S': order.customer_name},
        'product': {'S': order.product},
        'quantity': {'N': str(order.quantity)},
        'status': {'S': order.status},
        'createdAt': {'S': order.created_at},
    }


def item_to_order(item: Item) -> Order:
    """Convert a DynamoDB item into an Order, defaulting unreadable fields."""
    values: Dict[str, Any] = {name: _read_string(item, name) for name in STRING_ATTRIBUTES}
    values['quantity'] = _read_quantity(item)
    return Order.model_validate(values)


def _read_attribute(item: Item, name: str, type_descriptor: str) -> Any:
    attribute = item.get(name)
    if attribute is None:
        logger.warning('Order attribute missing from item', extra={'attribute': name})
        return None
    if not isinstance(attribute, dict) or type_descriptor not in attribute:
        logger.warning('Order attribute has unexpected type', extra={
            'attribute': name,
            'expected_type': type_descriptor,
            'found_types': list(attribute) if isinstance(attribute, dict) else type(attribute).__name__,
        })
        return None
    return attribute[type_descriptor]


def _read_string(item: Item, name: str) -> str:
    value = _read_attribute(item, name, 'S')
    return value if isinstance(value, str) else ''


def _read_quantity(item: Item) -> int:
    raw_value = _read_attribute(item, 'quantity', 'N')
    if raw_value is None:
        return 0
    try:
        quantity = int(raw_value)
    except (TypeError, ValueError):
        quantity = None

    if quantity is not None and QUANTITY_MIN <= quantity <= QUANTITY_MAX:
        return quantity

    logger.warning('Order quantity is not a 64-bit integer, defaulting to 0', extra={
            'order_id': _read_string(item, 'orderId'),
            'quantity': raw_value,
        })
    return 0
